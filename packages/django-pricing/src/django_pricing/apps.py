"""Django Pricing app configuration."""

from django.apps import AppConfig


class DjangoPricingConfig(AppConfig):
    """Configuration for django-pricing app."""

    name = "django_pricing"
    verbose_name = "Price Calculation"
    default_auto_field = "django.db.models.BigAutoField"
