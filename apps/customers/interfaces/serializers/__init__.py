from .customer_serializer import CustomerSerializer, LoginSerializer

__all__ = ['CustomerSerializer', 'LoginSerializer']
