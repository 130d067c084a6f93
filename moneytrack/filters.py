"""Compose optional WHERE clauses from request arguments.

Values always end up as bound parameters; only the set of clauses varies
with the arguments that were supplied.
"""
from .models import Transaction
from .models.transaction import TRANSACTION_TYPES
from .validation import parse_choice, parse_date, parse_int


def date_range(args):
    """Inclusive ``startDate``/``endDate`` bounds on the transaction date; either may be omitted."""
    column = Transaction.transaction_date
    start = parse_date(args.get("startDate"), "startDate")
    end = parse_date(args.get("endDate"), "endDate")
    clauses = []
    if start is not None:
        clauses.append(column >= start)
    if end is not None:
        clauses.append(column <= end)
    return clauses


def transaction_type(args):
    value = parse_choice(args.get("type"), "type", TRANSACTION_TYPES, required=False)
    if value is None:
        return []
    return [Transaction.type == value]


def transaction_category(args):
    category_id = parse_int(args.get("categoryId"), "categoryId")
    if category_id is None:
        return []
    return [Transaction.category_id == category_id]


def transaction_filters(args):
    return date_range(args) + transaction_type(args) + transaction_category(args)
