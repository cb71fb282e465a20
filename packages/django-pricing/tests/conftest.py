"""Pytest configuration for django-pricing tests."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

import django
import pytest
from django.conf import settings


def pytest_configure():
    """Configure Django settings for pytest.

    Kept identical to the django-pricing-money tests configuration: when the
    whole repo is collected, whichever conftest runs first configures both.
    """
    if not settings.configured:
        settings.configure(
            DEBUG=True,
            INSTALLED_APPS=[
                'django.contrib.contenttypes',
                'django.contrib.auth',
                'django_pricing',
            ],
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            PRICING_DEFAULT_CURRENCY='USD',
        )
    django.setup()


@dataclass
class Product:
    """Stand-in for a catalog product."""

    pk: int
    name: str
    price: Optional[Decimal] = None
    special_price: Optional[Decimal] = None
    tier_prices: dict = field(default_factory=dict)


@dataclass(frozen=True)
class FixedDiscount:
    """Discount taking a fixed amount off the price."""

    name: str
    amount: Decimal

    def amount_for(self, price):
        return price.__class__(self.amount, price.currency)

    def __str__(self):
        return self.name


@pytest.fixture
def product():
    """A product with a plain list price."""
    return Product(pk=1, name="Espresso Machine", price=Decimal("100.00"))


@pytest.fixture
def make_product():
    """Factory for products with custom pricing attributes."""
    def _make(**kwargs):
        kwargs.setdefault("pk", 2)
        kwargs.setdefault("name", "Grinder")
        return Product(**kwargs)
    return _make


@pytest.fixture
def make_discount():
    """Factory for fixed-amount discounts."""
    def _make(name="Spring Sale", amount="10.00"):
        return FixedDiscount(name=name, amount=Decimal(amount))
    return _make
