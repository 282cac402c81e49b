"""
Customer DTOs.
"""
from dataclasses import dataclass


@dataclass
class CustomerDTO:
    """Customer as seen by the storefront: the auth user behind a cart."""
    id: str
    username: str
    email: str = ""

    @classmethod
    def from_user(cls, user) -> 'CustomerDTO':
        return cls(
            id=str(user.pk),
            username=user.get_username(),
            email=getattr(user, 'email', '') or '',
        )
