"""Calculator context: the working state a pricing pipeline runs over."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, List, Optional

from .conf import get_default_currency


@dataclass
class CalculatorContext:
    """Input of one price calculation.

    The pipeline that resolves discounts and tier prices fills this in before
    (or while) a CalculatedPrice is built from it. ``product`` may be swapped
    for the cheapest child of a grouped product when the lowest price is
    requested; ``applied_discounts`` holds whatever discount objects the
    discount collaborator hands in and is never interpreted here.
    """

    product: Any
    applied_discounts: List[Any] = field(default_factory=list)
    has_price_range: bool = False
    currency: str = field(default_factory=get_default_currency)
    quantity: int = 1
    tax_rate: Optional[Decimal] = None
    tax_inclusive: bool = False
