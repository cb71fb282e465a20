"""Exceptions for the pricing module."""


class PricingError(Exception):
    """Base exception for pricing errors."""

    pass


class InvalidArgumentError(PricingError, ValueError):
    """Raised when a price calculation is started without a context or product."""

    def __init__(self, argument, message=None):
        self.argument = argument
        super().__init__(message or f"Argument must not be None: {argument}")


class PricingStageError(PricingError):
    """Raised when a configured pricing stage cannot be loaded."""

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load pricing stage {path!r}: {reason}")
