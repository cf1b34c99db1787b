# budget_tracker/utils.py
from decimal import Decimal, InvalidOperation

from budget_tracker.core.errors import InvalidAmount


def to_decimal(value):
    """
    Coerce an int, float, str or Decimal into a Decimal.
    Floats go through str() so 0.1 becomes Decimal('0.1') rather than its
    binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidAmount(f"Not an amount: {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        result = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAmount(f"Not an amount: {value!r}") from None
    if not result.is_finite():
        raise InvalidAmount(f"Not an amount: {value!r}")
    return result


def non_negative_amount(value, what="amount"):
    """Return value as a Decimal, rejecting negatives."""
    amount = to_decimal(value)
    if amount < 0:
        raise InvalidAmount(f"{what} must not be negative, got {amount}")
    return amount
