# Domain services
from .pricing_engine import PricingEngine
from .tax import FlatRateTaxCalculator, TaxCalculator

__all__ = ['PricingEngine', 'FlatRateTaxCalculator', 'TaxCalculator']
