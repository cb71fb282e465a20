"""Integration and edge case tests for django-pricing-money."""
import pytest
from decimal import Decimal

from django_pricing_money import Money, Tax, CurrencyMismatchError, InvalidTaxRateError


class TestTaxCalculation:
    """Tests for Tax.calculate on net and gross prices."""

    def test_net_price_tax(self):
        """Tax on a net price is price * rate / 100."""
        tax = Tax.calculate(Money(Decimal("100.00"), "EUR"), Decimal("19"))

        assert tax.amount == Money(Decimal("19.00"), "EUR")
        assert tax.rate == Decimal("19")
        assert tax.price_net == Money(Decimal("100.00"), "EUR")
        assert tax.price_gross == Money(Decimal("119.00"), "EUR")

    def test_gross_price_tax(self):
        """Tax on a gross price is the part above price / (1 + rate / 100)."""
        tax = Tax.calculate(Money(Decimal("119.00"), "EUR"), 19, is_gross_price=True)

        assert tax.amount.quantized() == Money(Decimal("19.00"), "EUR")
        assert tax.price_net.quantized() == Money(Decimal("100.00"), "EUR")
        assert tax.price_gross == Money(Decimal("119.00"), "EUR")

    def test_zero_rate_is_tax_exempt(self):
        """A zero rate should yield a zero amount."""
        tax = Tax.calculate(Money(Decimal("50.00"), "USD"), "0")
        assert tax.amount.is_zero() is True
        assert tax.price_gross == Money(Decimal("50.00"), "USD")

    def test_tax_with_rounding_at_settlement(self):
        """Tax keeps full precision until quantized."""
        tax = Tax.calculate(Money(Decimal("19.99"), "USD"), Decimal("8.25"))

        assert tax.amount.amount == Decimal("1.649175")
        assert tax.amount.quantized().amount == Decimal("1.65")

    def test_tax_amount_drops_display_hint(self):
        """The tax amount should not inherit the price's display hint."""
        price = Money(Decimal("10.00"), "USD", post_format="{} *")
        assert Tax.calculate(price, 10).amount.post_format is None

    def test_inclusive_flag_is_kept(self):
        """The inclusive display flag should be stored as given."""
        tax = Tax.calculate(Money(Decimal("10.00"), "USD"), 10, inclusive=True)
        assert tax.inclusive is True
        assert tax.is_gross_price is False

    def test_negative_rate_raises(self):
        """Negative rates should raise InvalidTaxRateError."""
        with pytest.raises(InvalidTaxRateError):
            Tax.calculate(Money(Decimal("10.00"), "USD"), Decimal("-1"))

        with pytest.raises(InvalidTaxRateError):
            Tax(rate=-5, amount=Money.zero("USD"), price=Money.zero("USD"))

    def test_mixed_currency_tax_raises(self):
        """Tax amount and price must share a currency."""
        with pytest.raises(CurrencyMismatchError):
            Tax(rate=10, amount=Money("1", "USD"), price=Money("10", "EUR"))

    def test_tax_is_frozen(self):
        """Tax should be immutable."""
        tax = Tax.calculate(Money(Decimal("10.00"), "USD"), 10)
        with pytest.raises(AttributeError):
            tax.rate = Decimal("20")


class TestRealWorldCalculations:
    """Tests that simulate real-world price calculations."""

    def test_discount_then_tax(self):
        """Apply a percentage discount, then tax the discounted price."""
        regular = Money(Decimal("100.00"), "USD")
        final = regular - regular * Decimal("0.15")
        tax = Tax.calculate(final, Decimal("10"))

        assert final.amount == Decimal("85.00")
        assert tax.price_gross.quantized().amount == Decimal("93.50")

    def test_saving_ratio(self):
        """The saved share of a price is a plain Decimal ratio."""
        regular = Money(Decimal("80.00"), "USD")
        final = Money(Decimal("60.00"), "USD")

        assert (regular - final) / regular == Decimal("0.25")

    def test_lowest_price_of_variants(self):
        """min() over variant prices picks the cheapest one."""
        variants = [Money("12.50", "USD"), Money("9.99", "USD"), Money("11", "USD")]
        assert min(variants) == Money("9.99", "USD")

    def test_lowest_price_mixed_currencies_raises(self):
        """Variants priced in different currencies cannot be compared."""
        with pytest.raises(CurrencyMismatchError):
            min([Money("12.50", "USD"), Money("9.99", "EUR")])
