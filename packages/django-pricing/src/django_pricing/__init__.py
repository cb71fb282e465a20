"""Django Pricing - Calculated price model and staged pricing pipeline.

Provides:
- CalculatorContext: Input of one price calculation (product, discounts, currency)
- CalculatedPrice: Immutable result with regular/final/offer/lowest prices and tax
- CalculatedPriceBuilder: Staged construction used by pipeline stages
- PricingPipeline: Runs the stages configured in PRICING_STAGES

Usage:
    INSTALLED_APPS = [
        ...
        'django_pricing',
    ]

    price = calculate_display_price(CalculatorContext(product=product))
    if price is not None and price.has_discount:
        print(price.saving_percent, price.saving_amount)

See conf.py for all configuration options.
"""

__version__ = "0.1.0"

from django_pricing.calculated_price import CalculatedPrice, CalculatedPriceBuilder
from django_pricing.context import CalculatorContext
from django_pricing.exceptions import InvalidArgumentError, PricingError, PricingStageError
from django_pricing.pipeline import PricingPipeline
from django_pricing.selectors import (
    calculate_display_price,
    calculate_display_prices,
    serialize_calculated_price,
)

__all__ = [
    "CalculatedPrice",
    "CalculatedPriceBuilder",
    "CalculatorContext",
    "PricingPipeline",
    "calculate_display_price",
    "calculate_display_prices",
    "serialize_calculated_price",
    "InvalidArgumentError",
    "PricingError",
    "PricingStageError",
]
