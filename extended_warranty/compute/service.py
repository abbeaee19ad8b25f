"""
Compute Service

Deterministic calculation service for extended warranty computations:
- Price tier selection and warranty price
- Expiration dates (counted days with Monday exclusion, Sunday deferral)

All calculations are deterministic: same input → same output.
"""

from datetime import date
from decimal import Decimal
from typing import Tuple, Union

from dateutil.relativedelta import relativedelta, MO, SU


Number = Union[Decimal, int, float, str]

# Product price dividing the high tier from the low tier
PRICE_THRESHOLD = Decimal("500000")

HIGH_TIER_PERCENTAGE = Decimal("0.20")
LOW_TIER_PERCENTAGE = Decimal("0.10")

# High tier counts days skipping Mondays, low tier counts calendar days
HIGH_TIER_DAYS = 200
LOW_TIER_DAYS = 100

# Days added when the counted period ends on a Sunday (lands on Tuesday)
SUNDAY_DEFERRAL_DAYS = 2


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps floats like 450000.0 from dragging binary noise in
    return Decimal(str(value))


def is_high_tier(product_price: Number, threshold: Number = PRICE_THRESHOLD) -> bool:
    """Return True when the product price is strictly above the tier threshold."""
    return _to_decimal(product_price) > _to_decimal(threshold)


def calculate_warranty_price(
    product_price: Number,
    threshold: Number = PRICE_THRESHOLD,
    high_tier_percentage: Number = HIGH_TIER_PERCENTAGE,
    low_tier_percentage: Number = LOW_TIER_PERCENTAGE
) -> Tuple[Decimal, Decimal]:
    """
    Calculate the price of an extended warranty.

    Args:
        product_price: Price of the insured product
        threshold: Price above which the high tier percentage applies
        high_tier_percentage: Fraction charged above the threshold
        low_tier_percentage: Fraction charged at or below the threshold

    Returns:
        Tuple of (percentage applied, warranty price)
    """
    price = _to_decimal(product_price)
    if is_high_tier(price, threshold):
        percentage = _to_decimal(high_tier_percentage)
    else:
        percentage = _to_decimal(low_tier_percentage)
    return percentage, price * percentage


def add_counted_days(start_date: date, days: int) -> date:
    """
    Step forward from start_date until `days` non-Monday days have been landed on.

    Mondays are stepped over without being counted. If the last landed day is
    a Sunday the result is deferred to the following Tuesday.
    """
    current = start_date
    counted = 0
    while counted < days:
        current = current + relativedelta(days=+1)
        if current.weekday() != MO.weekday:
            counted += 1

    if current.weekday() == SU.weekday:
        current = current + relativedelta(days=+SUNDAY_DEFERRAL_DAYS)
    return current


def calculate_expiration_date(
    start_date: date,
    product_price: Number,
    threshold: Number = PRICE_THRESHOLD,
    high_tier_days: int = HIGH_TIER_DAYS,
    low_tier_days: int = LOW_TIER_DAYS
) -> date:
    """
    Calculate the expiration date of an extended warranty.

    Args:
        start_date: Date the warranty was requested
        product_price: Price of the insured product
        threshold: Price above which the high tier rule applies
        high_tier_days: Counted days for the high tier
        low_tier_days: Calendar days for the low tier

    Returns:
        Expiration date
    """
    if is_high_tier(product_price, threshold):
        return add_counted_days(start_date, high_tier_days)
    return start_date + relativedelta(days=+low_tier_days)
