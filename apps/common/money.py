"""Decimal helpers for money and weight values. Binary floats never reach arithmetic."""

from decimal import Decimal, InvalidOperation

ZERO = Decimal('0')

# Stored precision of derived money values (weight 3dp x rate 2dp).
MONEY_DECIMAL_PLACES = 5
MONEY_MAX_DIGITS = 18


def parse_decimal(value) -> Decimal:
    """
    Coerce a request value to Decimal.

    Accepts Decimal, int, numeric strings and floats (through ``str()`` so
    ``0.1`` becomes ``Decimal('0.1')``, not its binary expansion).

    Raises:
        ValueError: If the value is missing, not numeric, NaN or infinite
    """
    if value is None or isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Expected a number, got {value!r}")
    if not result.is_finite():
        raise ValueError(f"Expected a finite number, got {value!r}")
    return result


# Largest magnitude a (MONEY_MAX_DIGITS, MONEY_DECIMAL_PLACES) column holds.
MONEY_MAX_INTEGER_DIGITS = MONEY_MAX_DIGITS - MONEY_DECIMAL_PLACES


def fits_money_column(value: Decimal) -> bool:
    """True when ``value`` is stored without overflowing a money column."""
    return value.is_zero() or value.adjusted() < MONEY_MAX_INTEGER_DIGITS
