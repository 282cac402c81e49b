"""
Pricing engine.

Pure computation of cart money figures from line items and one catalog
snapshot. Nothing here touches storage or mutates its inputs.
"""
from decimal import Decimal
from typing import Iterable, Optional

from apps.catalog.domain.entities import CatalogProduct
from apps.catalog.domain.value_objects import CatalogSnapshot
from ..entities.cart_item import CartItem
from ..exceptions import ProductUnavailableError
from ..value_objects.cart_policy import CartPolicy
from ..value_objects.cart_totals import CartTotals, ZERO, quantize_money
from .tax import FlatRateTaxCalculator, TaxCalculator


class PricingEngine:
    """Computes unit prices, line totals and cart totals under a CartPolicy."""

    def __init__(self, policy: CartPolicy, tax_calculator: Optional[TaxCalculator] = None):
        self.policy = policy
        self.tax_calculator = tax_calculator or FlatRateTaxCalculator(policy.tax_rate)

    def unit_price(self, product: Optional[CatalogProduct], product_id: str = "") -> Decimal:
        """
        Price one unit of a product.

        Raises:
            ProductUnavailableError: the product is missing or out of stock.
        """
        if product is None:
            raise ProductUnavailableError(product_id, reason="not_found")
        if not product.in_stock:
            raise ProductUnavailableError(product.id, reason="out_of_stock")
        price = product.sale_price if product.on_sale else product.regular_price
        return quantize_money(price)

    @staticmethod
    def line_total(unit_price: Decimal, quantity: int) -> Decimal:
        return unit_price * quantity

    def effective_unit_price(self, item: CartItem, snapshot: CatalogSnapshot) -> Decimal:
        """
        Current price for an existing line.

        Lines whose product has since gone missing or out of stock keep their
        last captured price.
        """
        product = snapshot.get(item.product_id)
        if product is None or not product.in_stock:
            return item.unit_price
        return self.unit_price(product)

    def subtotal(self, items: Iterable[CartItem], snapshot: CatalogSnapshot) -> Decimal:
        """Sum of line totals, every line priced against the same snapshot."""
        return sum(
            (self.line_total(self.effective_unit_price(item, snapshot), item.quantity) for item in items),
            ZERO,
        )

    def tax(self, subtotal: Decimal) -> Decimal:
        return self.tax_calculator.calculate(subtotal)

    def shipping(self, subtotal: Decimal, items: Iterable[CartItem]) -> Decimal:
        """Flat fee below the free shipping threshold; nothing to ship costs nothing."""
        if not any(item.quantity > 0 for item in items):
            return ZERO
        if subtotal >= self.policy.free_shipping_threshold:
            return ZERO
        return quantize_money(self.policy.flat_shipping_fee)

    @staticmethod
    def total(subtotal: Decimal, tax: Decimal, shipping: Decimal) -> Decimal:
        return subtotal + tax + shipping

    def compute_totals(self, items: Iterable[CartItem], snapshot: CatalogSnapshot) -> CartTotals:
        """Recompute every figure from scratch; tax and shipping follow the new subtotal."""
        items = list(items)
        subtotal = quantize_money(self.subtotal(items, snapshot))
        tax = self.tax(subtotal)
        shipping = self.shipping(subtotal, items)
        return CartTotals(
            subtotal=subtotal,
            tax=tax,
            shipping=shipping,
            total=self.total(subtotal, tax, shipping),
            currency=self.policy.currency,
        )
