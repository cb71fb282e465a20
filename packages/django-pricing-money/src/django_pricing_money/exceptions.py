"""Exceptions for django-pricing-money."""


class CurrencyMismatchError(ValueError):
    """Raised when attempting operations between different currencies."""
    pass


class InvalidTaxRateError(ValueError):
    """Raised when a tax rate is negative."""
    pass
