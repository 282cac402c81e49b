# Application services
from .identity_transition import CartIdentityTransitionHandler, LoginTransitionResult

__all__ = ['CartIdentityTransitionHandler', 'LoginTransitionResult']
