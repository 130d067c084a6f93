"""Parsing helpers for JSON bodies and query strings.

Each helper raises :class:`~moneytrack.errors.ValidationError` with a message
naming the offending field, so handlers can parse input before touching the
database.
"""
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from .errors import ValidationError

CENT = Decimal("0.01")
MAX_AMOUNT = 10 ** 10


def json_body(request):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def _blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def parse_text(value, field, required=False):
    if _blank(value):
        if required:
            raise ValidationError(f"{field} is required")
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    return value.strip()


def parse_choice(value, field, choices, required=True):
    if _blank(value):
        if required:
            raise ValidationError(f"{field} is required")
        return None
    if value not in choices:
        raise ValidationError(f"{field} must be one of: {', '.join(choices)}")
    return value


def parse_amount(value, field="amount"):
    if _blank(value) or isinstance(value, bool):
        raise ValidationError(f"{field} is required")
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"{field} must be a number")
    if not amount.is_finite():
        raise ValidationError(f"{field} must be a number")
    # must fit NUMERIC(12, 2)
    if abs(amount) >= MAX_AMOUNT or amount != amount.quantize(CENT):
        raise ValidationError(f"{field} must have at most 2 decimal places and be below {MAX_AMOUNT:,}")
    return amount


def parse_date(value, field, required=False):
    if _blank(value):
        if required:
            raise ValidationError(f"{field} is required")
        return None
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        # full timestamps keep only the day
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise ValidationError(f"{field} must be a date in YYYY-MM-DD format")


def parse_int(value, field, required=False, minimum=None):
    if _blank(value):
        if required:
            raise ValidationError(f"{field} is required")
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{field} must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be an integer")
    if minimum is not None and number < minimum:
        raise ValidationError(f"{field} must be at least {minimum}")
    return number
