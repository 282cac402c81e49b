from .customer_dto import CustomerDTO

__all__ = ['CustomerDTO']
