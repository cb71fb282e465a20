"""Tax value object: a rate and the tax amount computed for one price."""

from decimal import Decimal
from dataclasses import dataclass
from typing import Union

from django_pricing_money.exceptions import CurrencyMismatchError, InvalidTaxRateError
from django_pricing_money.money import Money


HUNDRED = Decimal("100")


@dataclass(frozen=True)
class Tax:
    """
    Immutable tax breakdown for a single price.

    Attributes:
        rate: Tax rate as a percentage (19 means 19%)
        amount: The tax amount
        price: The price the tax was calculated for
        is_gross_price: Whether ``price`` already includes the tax
        inclusive: Whether the price should be displayed including tax

    Usage:
        tax = Tax.calculate(Money("100.00", "EUR"), Decimal("19"))
        tax.amount       # Money(Decimal("19.00"), "EUR")
        tax.price_gross  # Money(Decimal("119.00"), "EUR")
    """
    rate: Decimal
    amount: Money
    price: Money
    is_gross_price: bool = False
    inclusive: bool = False

    def __post_init__(self):
        if not isinstance(self.rate, Decimal):
            object.__setattr__(self, 'rate', Decimal(str(self.rate)))
        if self.rate < 0:
            raise InvalidTaxRateError(f"Tax rate cannot be negative: {self.rate}")
        if self.amount.currency != self.price.currency:
            raise CurrencyMismatchError(
                f"Tax amount in {self.amount.currency} but price in {self.price.currency}"
            )

    @classmethod
    def calculate(
        cls,
        price: Money,
        rate: Union[Decimal, int, float, str],
        *,
        is_gross_price: bool = False,
        inclusive: bool = False,
    ) -> 'Tax':
        """
        Calculate the tax for a price at the given rate.

        For a net price the tax is ``price * rate / 100``. For a gross price
        the tax is the part of the price above ``price / (1 + rate / 100)``.
        """
        rate = Decimal(str(rate))
        if rate < 0:
            raise InvalidTaxRateError(f"Tax rate cannot be negative: {rate}")

        if rate == 0:
            amount = Money.zero(price.currency)
        elif is_gross_price:
            amount = price - price / (1 + rate / HUNDRED)
        else:
            amount = price * (rate / HUNDRED)

        return cls(
            rate=rate,
            amount=amount.with_post_format(None),
            price=price,
            is_gross_price=is_gross_price,
            inclusive=inclusive,
        )

    @property
    def price_net(self) -> Money:
        """The price without tax."""
        if self.is_gross_price:
            return self.price - self.amount
        return self.price

    @property
    def price_gross(self) -> Money:
        """The price including tax."""
        if self.is_gross_price:
            return self.price
        return self.price + self.amount
