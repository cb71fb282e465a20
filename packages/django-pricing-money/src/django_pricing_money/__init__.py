"""Django Pricing Money - Money and Tax value objects with currency-aware arithmetic."""

__version__ = "0.1.0"

from django_pricing_money.conf import CURRENCY_DECIMALS, decimals_for
from django_pricing_money.money import Money
from django_pricing_money.tax import Tax
from django_pricing_money.exceptions import CurrencyMismatchError, InvalidTaxRateError

__all__ = [
    "Money",
    "Tax",
    "CURRENCY_DECIMALS",
    "decimals_for",
    "CurrencyMismatchError",
    "InvalidTaxRateError",
]
