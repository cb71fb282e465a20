"""Selectors for the pricing module.

Read-side helpers for views and APIs: calculate prices for display and turn
a CalculatedPrice into plain data.
"""

import logging
from typing import Iterable, List, Optional

from django_pricing_money import Money, Tax

from .calculated_price import CalculatedPrice
from .context import CalculatorContext
from .exceptions import InvalidArgumentError
from .pipeline import PricingPipeline

logger = logging.getLogger(__name__)


def calculate_display_price(
    context: Optional[CalculatorContext],
    *,
    pipeline: Optional[PricingPipeline] = None,
) -> Optional[CalculatedPrice]:
    """Calculate a price for display, or None if it cannot be calculated.

    A context without a product yields None so the caller omits the price
    instead of showing a partially populated result. Errors raised by the
    stages themselves are not caught.
    """
    pipeline = pipeline or PricingPipeline.from_settings()
    try:
        return pipeline.calculate(context)
    except InvalidArgumentError as exc:
        logger.warning(f"Omitting price from display: {exc}")
        return None


def calculate_display_prices(
    contexts: Iterable[Optional[CalculatorContext]],
    *,
    pipeline: Optional[PricingPipeline] = None,
) -> List[Optional[CalculatedPrice]]:
    """Calculate display prices for many contexts with one pipeline."""
    pipeline = pipeline or PricingPipeline.from_settings()
    return [calculate_display_price(context, pipeline=pipeline) for context in contexts]


def serialize_calculated_price(price: CalculatedPrice) -> dict:
    """Turn a CalculatedPrice into a JSON-ready dictionary.

    Returns a dictionary with every stored field plus:
    - has_discount
    - saving_percent
    - saving_amount (None without a discount)
    """
    product = price.product
    return {
        "product": str(getattr(product, "pk", product)),
        "applied_discounts": [str(discount) for discount in price.applied_discounts],
        "regular_price": _money_to_dict(price.regular_price),
        "final_price": _money_to_dict(price.final_price),
        "has_price_range": price.has_price_range,
        "offer_price": _money_to_dict(price.offer_price),
        "preselected_price": _money_to_dict(price.preselected_price),
        "lowest_price": _money_to_dict(price.lowest_price),
        "tax": _tax_to_dict(price.tax),
        "has_discount": price.has_discount,
        "saving_percent": price.saving_percent,
        "saving_amount": _money_to_dict(price.saving_amount),
    }


def _money_to_dict(money: Optional[Money]) -> Optional[dict]:
    if money is None:
        return None
    return {
        "amount": str(money.amount),
        "currency": money.currency,
        "formatted": money.format(),
    }


def _tax_to_dict(tax: Optional[Tax]) -> Optional[dict]:
    if tax is None:
        return None
    return {
        "rate": str(tax.rate),
        "amount": _money_to_dict(tax.amount),
        "price": _money_to_dict(tax.price),
        "is_gross_price": tax.is_gross_price,
        "inclusive": tax.inclusive,
    }
