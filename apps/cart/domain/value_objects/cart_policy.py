"""
Cart policy value object.
"""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping

from shared.domain import ValueObject


class LoginMergePolicy(str, Enum):
    """What happens to an anonymous cart when its owner logs in."""
    DISCARD = "discard"
    MERGE = "merge"


@dataclass(frozen=True, eq=False)
class CartPolicy(ValueObject):
    """Pricing and limit constants for carts."""
    currency: str = "USD"
    tax_rate: Decimal = Decimal("0.08")
    flat_shipping_fee: Decimal = Decimal("9.99")
    free_shipping_threshold: Decimal = Decimal("50.00")
    max_item_quantity: int = 100
    login_merge_policy: LoginMergePolicy = LoginMergePolicy.DISCARD

    def __post_init__(self):
        for name in ('tax_rate', 'flat_shipping_fee', 'free_shipping_threshold'):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                object.__setattr__(self, name, Decimal(str(value)))
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        if self.max_item_quantity < 1:
            raise ValueError("max_item_quantity must be at least 1")
        object.__setattr__(self, 'login_merge_policy', LoginMergePolicy(self.login_merge_policy))

    @classmethod
    def from_settings(cls, config: Mapping[str, Any]) -> 'CartPolicy':
        """Build a policy from the ``CART`` settings dict."""
        defaults = cls()
        return cls(
            currency=config.get('CURRENCY', defaults.currency),
            tax_rate=config.get('TAX_RATE', defaults.tax_rate),
            flat_shipping_fee=config.get('FLAT_SHIPPING_FEE', defaults.flat_shipping_fee),
            free_shipping_threshold=config.get('FREE_SHIPPING_THRESHOLD', defaults.free_shipping_threshold),
            max_item_quantity=int(config.get('MAX_ITEM_QUANTITY', defaults.max_item_quantity)),
            login_merge_policy=config.get('LOGIN_MERGE_POLICY', defaults.login_merge_policy),
        )
