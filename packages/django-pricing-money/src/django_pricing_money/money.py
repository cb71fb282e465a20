"""Money value object with currency-aware arithmetic and ordering."""

from decimal import Decimal, ROUND_HALF_EVEN
from dataclasses import dataclass, field, replace
from typing import Optional, Union

from django_pricing_money.conf import decimals_for
from django_pricing_money.exceptions import CurrencyMismatchError


Number = Union[Decimal, int, float]


@dataclass(frozen=True)
class Money:
    """
    Immutable money value object.

    Always normalizes amount to Decimal for precision.
    Supports currency-aware arithmetic and comparison. Mixing currencies
    raises CurrencyMismatchError instead of silently converting.

    ``post_format`` is an optional display hint (a ``str.format`` pattern
    such as ``"{} *"``) applied by ``format()``. It is carried through
    arithmetic but ignored by equality and hashing.

    Usage:
        price = Money(Decimal("19.99"), "USD")
        tax = Money(Decimal("1.60"), "USD")
        total = price + tax  # Money(Decimal("21.59"), "USD")

        # Quantize for display/settlement
        display = total.quantized()  # Uses banker's rounding
    """
    amount: Decimal
    currency: str
    post_format: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        """Normalize amount to Decimal."""
        if not isinstance(self.amount, Decimal):
            # Use object.__setattr__ because dataclass is frozen
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

    @classmethod
    def zero(cls, currency: str) -> 'Money':
        """Zero amount in the given currency."""
        return cls(Decimal("0"), currency)

    def quantized(self) -> 'Money':
        """
        Return quantized to currency decimals for display/settlement.

        Uses banker's rounding (ROUND_HALF_EVEN) which rounds .5 to the
        nearest even number, reducing bias over many transactions.

        Returns:
            New Money object with quantized amount
        """
        decimals = decimals_for(self.currency)
        quantized_amount = self.amount.quantize(
            Decimal(10) ** -decimals,
            rounding=ROUND_HALF_EVEN
        )
        return Money(quantized_amount, self.currency, self.post_format)

    def with_post_format(self, post_format: Optional[str]) -> 'Money':
        """Return a copy with the display hint replaced (None clears it)."""
        return replace(self, post_format=post_format)

    def format(self) -> str:
        """Render the quantized amount with its currency code."""
        text = f"{self.quantized().amount} {self.currency}"
        if self.post_format:
            return self.post_format.format(text)
        return text

    def __str__(self) -> str:
        return self.format()

    def _check_currency(self, other: 'Money', verb: str):
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot {verb} {self.currency} and {other.currency}"
            )

    def __add__(self, other: 'Money') -> 'Money':
        """Add two Money objects with the same currency."""
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot add {self.currency} to {other.currency}"
            )
        return Money(self.amount + other.amount, self.currency, self.post_format)

    def __sub__(self, other: 'Money') -> 'Money':
        """Subtract two Money objects with the same currency."""
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot subtract {other.currency} from {self.currency}"
            )
        return Money(self.amount - other.amount, self.currency, self.post_format)

    def __mul__(self, factor: Number) -> 'Money':
        """Multiply Money by a numeric factor."""
        return Money(self.amount * Decimal(str(factor)), self.currency, self.post_format)

    def __rmul__(self, factor: Number) -> 'Money':
        """Right multiplication (factor * money)."""
        return self.__mul__(factor)

    def __truediv__(self, other: Union['Money', Number]) -> Union['Money', Decimal]:
        """
        Divide by a number (-> Money) or by Money of the same currency.

        Dividing Money by Money returns the Decimal ratio of the amounts.
        Division by zero raises decimal.DivisionByZero (or InvalidOperation
        for 0 / 0); callers guard against a zero divisor.
        """
        if isinstance(other, Money):
            if self.currency != other.currency:
                raise CurrencyMismatchError(
                    f"Cannot divide {self.currency} by {other.currency}"
                )
            return self.amount / other.amount
        return Money(self.amount / Decimal(str(other)), self.currency, self.post_format)

    def __lt__(self, other: 'Money') -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other, "compare")
        return self.amount < other.amount

    def __le__(self, other: 'Money') -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other, "compare")
        return self.amount <= other.amount

    def __gt__(self, other: 'Money') -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other, "compare")
        return self.amount > other.amount

    def __ge__(self, other: 'Money') -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other, "compare")
        return self.amount >= other.amount

    def __neg__(self) -> 'Money':
        """Negate the money amount."""
        return Money(-self.amount, self.currency, self.post_format)

    def __abs__(self) -> 'Money':
        """Return absolute value of Money."""
        return Money(abs(self.amount), self.currency, self.post_format)

    def is_positive(self) -> bool:
        """Check if amount is greater than zero."""
        return self.amount > 0

    def is_negative(self) -> bool:
        """Check if amount is less than zero."""
        return self.amount < 0

    def is_zero(self) -> bool:
        """Check if amount is exactly zero."""
        return self.amount == 0
