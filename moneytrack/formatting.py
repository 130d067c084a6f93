from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")


def to_decimal(value):
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    # floats come back from SQLite aggregates; go through str to avoid binary noise
    return Decimal(str(value))


def money(value):
    """Render an amount as a string with exactly two decimal places."""
    return str(to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP))


def iso(value):
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)
