"""Result of a price calculation for a single product.

CalculatedPrice is the immutable value handed to presentation and
serialization code. CalculatedPriceBuilder is its staged counterpart: pipeline
stages populate the builder one field at a time and ``build()`` freezes the
result, so a half-populated price is never handed out.

All monetary amounts are in the target currency of the calculator context.
Comparing or subtracting prices in different currencies raises
CurrencyMismatchError from Money.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple

from django_pricing_money import Money, Tax

from .context import CalculatorContext
from .exceptions import InvalidArgumentError


def _check_context(context: Optional[CalculatorContext]) -> None:
    if context is None:
        raise InvalidArgumentError("context")
    if getattr(context, "product", None) is None:
        raise InvalidArgumentError("context.product")


class SavingsMixin:
    """Discount values derived from ``regular_price`` and ``final_price``.

    Recomputed on every read; nothing is cached.
    """

    @property
    def has_discount(self) -> bool:
        """Whether the final price is below the regular price."""
        return self.final_price < self.regular_price

    @property
    def saving_percent(self) -> float:
        """The saving, in percent, compared to the regular price.

        0.0 when there is no discount or the regular price is zero.
        """
        if not self.has_discount or self.regular_price.is_zero():
            return 0.0
        ratio = (self.regular_price - self.final_price) / self.regular_price
        return float(ratio * 100)

    @property
    def saving_amount(self) -> Optional[Money]:
        """The saved amount without display hint, or None without a discount."""
        if not self.has_discount:
            return None
        return (self.regular_price - self.final_price).with_post_format(None)


@dataclass(frozen=True)
class CalculatedPrice(SavingsMixin):
    """Immutable result of a price calculation for one product.

    ``product`` is not necessarily the requested product: when the lowest
    price of a grouped product was calculated it is the cheapest child.
    ``offer_price``, ``preselected_price``, ``lowest_price`` and ``tax`` are
    None when absent, never a zero amount.
    """

    product: Any
    applied_discounts: Tuple[Any, ...]
    regular_price: Money
    final_price: Money
    has_price_range: bool = False
    offer_price: Optional[Money] = None
    preselected_price: Optional[Money] = None
    lowest_price: Optional[Money] = None
    tax: Optional[Tax] = None

    def __post_init__(self):
        """Require a product and freeze the discount collection."""
        if self.product is None:
            raise InvalidArgumentError("product")
        if not isinstance(self.applied_discounts, tuple):
            # Use object.__setattr__ because dataclass is frozen
            object.__setattr__(self, "applied_discounts", tuple(self.applied_discounts or ()))

    @classmethod
    def create(cls, context: CalculatorContext, **fields) -> "CalculatedPrice":
        """Build a price from a context plus the computed sub-results.

        Copies ``product``, ``applied_discounts`` and ``has_price_range`` from
        the context. ``regular_price`` and ``final_price`` default to zero in
        the context currency.

        Raises:
            InvalidArgumentError: If context or context.product is None.
        """
        _check_context(context)
        fields.setdefault("regular_price", Money.zero(context.currency))
        fields.setdefault("final_price", Money.zero(context.currency))
        fields.setdefault("has_price_range", context.has_price_range)
        return cls(
            product=context.product,
            applied_discounts=tuple(context.applied_discounts or ()),
            **fields,
        )

    def evolve(self, **changes) -> "CalculatedPrice":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


class CalculatedPriceBuilder(SavingsMixin):
    """Mutable, staged construction of a CalculatedPrice.

    Usage:
        builder = CalculatedPriceBuilder(context)
        builder.regular_price = Money("100.00", "USD")
        builder.final_price = Money("80.00", "USD")
        builder.has_discount   # True, derived live
        price = builder.build()

    Not thread-safe; stages that run concurrently must serialize writes.
    """

    def __init__(self, context: CalculatorContext):
        _check_context(context)
        self._context = context
        self._product = context.product
        self.applied_discounts = list(context.applied_discounts or ())
        self.has_price_range = context.has_price_range
        self.regular_price = Money.zero(context.currency)
        self.final_price = Money.zero(context.currency)
        self.offer_price: Optional[Money] = None
        self.preselected_price: Optional[Money] = None
        self.lowest_price: Optional[Money] = None
        self.tax: Optional[Tax] = None

    @property
    def context(self) -> CalculatorContext:
        return self._context

    @property
    def product(self):
        return self._product

    def build(self) -> CalculatedPrice:
        """Freeze the current state into a CalculatedPrice."""
        return CalculatedPrice(
            product=self._product,
            applied_discounts=tuple(self.applied_discounts),
            regular_price=self.regular_price,
            final_price=self.final_price,
            has_price_range=self.has_price_range,
            offer_price=self.offer_price,
            preselected_price=self.preselected_price,
            lowest_price=self.lowest_price,
            tax=self.tax,
        )

    def __repr__(self):
        return (
            f"<CalculatedPriceBuilder product={self._product!r} "
            f"regular={self.regular_price} final={self.final_price}>"
        )
