"""
Cart identity value object.
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import ValueObject
from ..exceptions import CartIdentityError


@dataclass(frozen=True, eq=False)
class CartIdentity(ValueObject):
    """
    Owner of a cart: a customer id or an anonymous session id, never both.

    Both ids are opaque strings to the cart.
    """
    customer_id: Optional[str] = None
    session_id: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'customer_id', self.customer_id or None)
        object.__setattr__(self, 'session_id', self.session_id or None)
        if self.customer_id is not None and self.session_id is not None:
            raise CartIdentityError("A cart belongs to a customer or a session, not both")

    @classmethod
    def resolve(
        cls,
        customer_id: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> 'CartIdentity':
        """Pick the meaningful identity; an authenticated customer wins."""
        if customer_id:
            return cls(customer_id=str(customer_id))
        if session_id:
            return cls(session_id=str(session_id))
        return cls()

    @classmethod
    def for_customer(cls, customer_id: str) -> 'CartIdentity':
        return cls(customer_id=str(customer_id))

    @classmethod
    def for_session(cls, session_id: str) -> 'CartIdentity':
        return cls(session_id=str(session_id))

    @property
    def is_present(self) -> bool:
        return self.customer_id is not None or self.session_id is not None

    @property
    def is_authenticated(self) -> bool:
        return self.customer_id is not None

    @property
    def is_anonymous(self) -> bool:
        return self.customer_id is None

    def require(self) -> 'CartIdentity':
        """Return self, or fail when no identity is present."""
        if not self.is_present:
            raise CartIdentityError()
        return self

    def __str__(self) -> str:
        if self.customer_id is not None:
            return f"customer:{self.customer_id}"
        if self.session_id is not None:
            return f"session:{self.session_id}"
        return "anonymous"
