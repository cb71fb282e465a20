"""Built-in pricing stages.

A stage is any callable ``stage(context, builder)`` that reads the calculator
context and the product and writes fields of the CalculatedPriceBuilder.
Stages run in the order configured in PRICING_STAGES.

The built-in stages read these optional product attributes:
- ``price``: the regular unit price (number or Money)
- ``special_price``: a promotional offer price
- ``tier_prices``: mapping of minimum quantity -> unit price

``preselected_price`` and swapping in the cheapest child of a grouped
product depend on attribute and product-grouping data this package does not
model; no built-in stage sets them. Projects add their own stages to
PRICING_STAGES for that.
"""

from django_pricing_money import Money, Tax


def _to_money(value, currency: str) -> Money:
    if isinstance(value, Money):
        return value
    return Money(value, currency)


def regular_price_stage(context, builder):
    """Start both regular and final price at the product's list price."""
    price = getattr(builder.product, "price", None)
    if price is None:
        return
    builder.regular_price = _to_money(price, context.currency)
    builder.final_price = builder.regular_price


def offer_price_stage(context, builder):
    """Apply the product's special price when it is cheaper."""
    special = getattr(builder.product, "special_price", None)
    if special is None:
        return
    offer = _to_money(special, context.currency)
    builder.offer_price = offer
    if offer < builder.final_price:
        builder.final_price = offer


def tier_price_stage(context, builder):
    """Apply the tier price for the requested quantity.

    Any tier pricing turns the result into a price range; the lowest price
    is the cheapest of the tiers and the current final price. A product
    without a list price takes the tier with the smallest minimum quantity
    as its regular price.
    """
    tiers = getattr(builder.product, "tier_prices", None)
    if not tiers:
        return

    tier_prices = {
        min_quantity: _to_money(amount, context.currency)
        for min_quantity, amount in tiers.items()
    }
    builder.has_price_range = True

    if builder.regular_price.is_zero() and builder.final_price.is_zero():
        builder.regular_price = tier_prices[min(tier_prices)]
        builder.final_price = builder.regular_price

    builder.lowest_price = min([builder.final_price, *tier_prices.values()])

    eligible = [qty for qty in tier_prices if qty <= context.quantity]
    if eligible:
        tier_price = tier_prices[max(eligible)]
        if tier_price < builder.final_price:
            builder.final_price = tier_price


def discount_stage(context, builder):
    """Subtract each applied discount from the final price.

    Discounts exposing ``amount_for(price) -> Money`` reduce the final price,
    which never drops below zero. Other discount objects are left untouched.
    A lowest price above the discounted final price is lowered to it.
    """
    zero = Money.zero(builder.final_price.currency)
    for discount in builder.applied_discounts:
        amount_for = getattr(discount, "amount_for", None)
        if not callable(amount_for):
            continue
        reduced = builder.final_price - amount_for(builder.final_price)
        builder.final_price = max(reduced, zero)

    if builder.lowest_price is not None and builder.final_price < builder.lowest_price:
        builder.lowest_price = builder.final_price


def tax_stage(context, builder):
    """Calculate tax on the final price when the context carries a rate."""
    if context.tax_rate is None:
        return
    builder.tax = Tax.calculate(
        builder.final_price,
        context.tax_rate,
        inclusive=context.tax_inclusive,
    )
