"""Currency configuration for django-pricing-money.

Currency precision can be extended or overridden in your Django settings.py.

Example:
    # settings.py
    PRICING_CURRENCY_DECIMALS = {'CLP': 0, 'BHD': 3}
"""

from django.conf import settings


# Currency precision rules for settlement/display
CURRENCY_DECIMALS = {
    'USD': 2, 'EUR': 2, 'GBP': 2, 'MXN': 2,
    'CAD': 2, 'AUD': 2, 'CHF': 2, 'CNY': 2,
    'JPY': 0, 'KRW': 0,  # No decimal currencies
    'BTC': 8,  # Crypto
}

DEFAULT_DECIMALS = 2


def get_currency_decimals() -> dict:
    """Built-in currency precision merged with PRICING_CURRENCY_DECIMALS."""
    if not settings.configured:
        return dict(CURRENCY_DECIMALS)
    overrides = getattr(settings, 'PRICING_CURRENCY_DECIMALS', None) or {}
    return {**CURRENCY_DECIMALS, **overrides}


def decimals_for(currency: str) -> int:
    """Number of decimal places used to quantize amounts in a currency."""
    return get_currency_decimals().get(currency, DEFAULT_DECIMALS)
