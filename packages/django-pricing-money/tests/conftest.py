"""Pytest configuration for django-pricing-money tests."""
import django
from django.conf import settings


def pytest_configure():
    """Configure Django settings for pytest.

    Kept identical to the django-pricing tests configuration: when the whole
    repo is collected, whichever conftest runs first configures both suites.
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
