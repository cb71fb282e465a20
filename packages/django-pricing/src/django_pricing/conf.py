"""Django Pricing configuration.

All settings can be overridden in your Django settings.py.

Example:
    # settings.py
    PRICING_DEFAULT_CURRENCY = 'EUR'
    PRICING_STAGES = [
        'django_pricing.stages.regular_price_stage',
        'shop.pricing.member_discount_stage',
        'django_pricing.stages.tax_stage',
    ]

Settings are read on every access so that override_settings applies.
"""

from django.conf import settings


DEFAULT_CURRENCY = 'USD'

DEFAULT_STAGES = (
    'django_pricing.stages.regular_price_stage',
    'django_pricing.stages.offer_price_stage',
    'django_pricing.stages.tier_price_stage',
    'django_pricing.stages.discount_stage',
    'django_pricing.stages.tax_stage',
)


def get_setting(name: str, default=None):
    """Get a setting with PRICING_ prefix."""
    if not settings.configured:
        return default
    return getattr(settings, f"PRICING_{name}", default)


def get_default_currency() -> str:
    """Currency used when a calculator context does not name one."""
    return get_setting('DEFAULT_CURRENCY', DEFAULT_CURRENCY)


def get_stage_paths() -> list:
    """Dotted paths of the stages the default pipeline runs, in order."""
    return list(get_setting('STAGES', DEFAULT_STAGES))


# =============================================================================
# DEFAULT SETTINGS REFERENCE
# =============================================================================

# PRICING_DEFAULT_CURRENCY = 'USD'  # Currency of new calculator contexts
# PRICING_CURRENCY_DECIMALS = {}  # Extra/overridden currency precision (django_pricing_money)
# PRICING_STAGES = DEFAULT_STAGES  # Dotted paths of pipeline stages
