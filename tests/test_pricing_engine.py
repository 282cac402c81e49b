"""
Pricing engine tests.
"""
from decimal import Decimal

import pytest

from apps.cart.domain.entities import CartItem
from apps.cart.domain.exceptions import ProductUnavailableError
from apps.cart.domain.services.pricing_engine import PricingEngine
from apps.cart.domain.services.tax import FlatRateTaxCalculator, TaxCalculator
from apps.cart.domain.value_objects.cart_policy import CartPolicy
from apps.cart.domain.value_objects.cart_totals import CartTotals, quantize_money
from apps.catalog.domain.entities import CatalogProduct
from apps.catalog.domain.value_objects import CatalogSnapshot


class TestUnitPrice:
    def test_regular_price(self, pricing, catalog_products):
        assert pricing.unit_price(catalog_products['mug']) == Decimal('10.00')

    def test_sale_price_wins_when_lower(self, pricing, catalog_products):
        assert pricing.unit_price(catalog_products['lamp']) == Decimal('20.00')

    @pytest.mark.parametrize('sale_price', ['0', '30.00', '25.00'])
    def test_sale_price_ignored_unless_positive_and_lower(self, pricing, sale_price):
        product = CatalogProduct(id='p', regular_price='25.00', sale_price=sale_price)
        assert pricing.unit_price(product) == Decimal('25.00')

    def test_missing_product_is_unavailable(self, pricing):
        with pytest.raises(ProductUnavailableError) as exc_info:
            pricing.unit_price(None, 'ghost')
        assert exc_info.value.product_id == 'ghost'
        assert exc_info.value.code == 'PRODUCT_UNAVAILABLE'

    def test_out_of_stock_is_unavailable(self, pricing, catalog_products):
        with pytest.raises(ProductUnavailableError):
            pricing.unit_price(catalog_products['chair'])


class TestTotals:
    def test_small_order_pays_flat_shipping(self, pricing, catalog_products):
        snapshot = CatalogSnapshot.of(catalog_products.values())
        items = [CartItem(product_id='mug', quantity=2, unit_price=Decimal('10.00'))]

        totals = pricing.compute_totals(items, snapshot)

        assert totals.subtotal == Decimal('20.00')
        assert totals.tax == Decimal('1.60')
        assert totals.shipping == Decimal('9.99')
        assert totals.total == Decimal('31.59')

    def test_free_shipping_at_threshold(self, pricing, catalog_products):
        snapshot = CatalogSnapshot.of(catalog_products.values())
        items = [CartItem(product_id='mug', quantity=5, unit_price=Decimal('10.00'))]

        totals = pricing.compute_totals(items, snapshot)

        assert totals.subtotal == Decimal('50.00')
        assert totals.shipping == Decimal('0.00')
        assert totals.total == Decimal('54.00')

    def test_empty_cart_is_all_zero(self, pricing):
        totals = pricing.compute_totals([], CatalogSnapshot())
        assert totals == CartTotals.zero()
        assert totals.is_zero

    def test_prices_come_from_snapshot_not_stored_line(self, pricing, catalog_products):
        snapshot = CatalogSnapshot.of(catalog_products.values())
        items = [CartItem(product_id='lamp', quantity=1, unit_price=Decimal('25.00'))]

        assert pricing.subtotal(items, snapshot) == Decimal('20.00')

    def test_unavailable_line_keeps_stored_price(self, pricing):
        items = [CartItem(product_id='gone', quantity=3, unit_price=Decimal('4.00'))]
        assert pricing.subtotal(items, CatalogSnapshot()) == Decimal('12.00')

    def test_tax_rounds_half_up(self, policy):
        engine = PricingEngine(policy.with_changes(tax_rate=Decimal('0.075')))
        # 0.10 * 0.075 = 0.0075
        assert engine.tax(Decimal('0.10')) == Decimal('0.01')

    def test_custom_tax_calculator(self, policy, catalog_products):
        class NoTax(TaxCalculator):
            def calculate(self, subtotal):
                return Decimal('0.00')

        engine = PricingEngine(policy, tax_calculator=NoTax())
        snapshot = CatalogSnapshot.of(catalog_products.values())
        items = [CartItem(product_id='mug', quantity=1, unit_price=Decimal('10.00'))]

        assert engine.compute_totals(items, snapshot).total == Decimal('19.99')


def test_flat_rate_tax_quantizes():
    assert FlatRateTaxCalculator(Decimal('0.08')).calculate(Decimal('19.99')) == Decimal('1.60')


def test_quantize_money_accepts_strings():
    assert quantize_money('1.005') == Decimal('1.01')


def test_totals_must_add_up():
    with pytest.raises(ValueError):
        CartTotals(subtotal=Decimal('1.00'), tax=Decimal('0.08'), total=Decimal('2.00'))


def test_policy_values_compare_by_fields(policy):
    assert policy == CartPolicy()
    assert policy.with_changes(max_item_quantity=5) != policy
    assert len({policy, CartPolicy()}) == 1
