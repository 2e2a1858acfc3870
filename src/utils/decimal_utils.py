"""Helpers for Decimal normalization."""

from contextlib import contextmanager
from decimal import Decimal, InvalidOperation, Overflow, localcontext
from functools import wraps


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to a finite Decimal.

    Args:
        value: Raw numeric value from JSON, SQL, or adapters.

    Returns:
        Decimal: Normalized numeric value. Missing, unparsable, and
        non-finite values (NaN, Infinity) become zero.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            return Decimal("0")
    if not result.is_finite():
        return Decimal("0")
    return result


@contextmanager
def lenient_context():
    """Run Decimal arithmetic with the overflow and invalid traps disabled.

    Inside the block an out-of-range result becomes Infinity or NaN instead
    of raising; callers pass it through :func:`coerce_decimal` afterwards.
    """
    with localcontext() as context:
        context.traps[Overflow] = False
        context.traps[InvalidOperation] = False
        yield context


def finite_result(func):
    """Decorate a Decimal computation so it always returns a finite value."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        with lenient_context():
            return coerce_decimal(func(*args, **kwargs))

    return wrapper


@finite_result
def sum_decimals(values) -> Decimal:
    """Sum an iterable of Decimals starting from zero.

    An overflowing sum resolves to zero.
    """
    return sum(values, start=Decimal("0"))


__all__ = [
    "coerce_decimal",
    "lenient_context",
    "finite_result",
    "sum_decimals",
]
