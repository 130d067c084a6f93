import calendar
from datetime import date
from flask import Blueprint, jsonify, request
from sqlalchemy import case, extract, func
from ...extensions import db
from ...filters import date_range, transaction_type
from ...formatting import money, to_decimal
from ...models import Category, Transaction
from ...validation import parse_int

analytics_bp = Blueprint("analytics", __name__, url_prefix="/api/analytics")

DEFAULT_TREND_MONTHS = 6


def _total_of(ttype):
    return func.coalesce(
        func.sum(case((Transaction.type == ttype, Transaction.amount), else_=0)), 0
    )


def months_before(day, months):
    """The same day ``months`` calendar months earlier, clamped to the month's length."""
    index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    return date(year, month, min(day.day, calendar.monthrange(year, month)[1]))


def summary(args):
    total_income, total_expenses, count = (
        db.session.query(_total_of("income"), _total_of("expense"), func.count(Transaction.id))
        .filter(*date_range(args))
        .one()
    )
    total_income, total_expenses = to_decimal(total_income), to_decimal(total_expenses)
    return {
        "total_income": money(total_income),
        "total_expenses": money(total_expenses),
        "balance": money(total_income - total_expenses),
        "transaction_count": int(count or 0),
    }


def by_category(args):
    total = func.coalesce(func.sum(Transaction.amount), 0).label("total")
    count = func.count(Transaction.id).label("count")
    rows = (
        db.session.query(Category.name, Category.color, Category.icon, total, count)
        .join(Transaction, Transaction.category_id == Category.id)
        .filter(*(date_range(args) + transaction_type(args)))
        .group_by(Category.id, Category.name, Category.color, Category.icon)
        .having(func.count(Transaction.id) > 0)
        .order_by(total.desc(), Category.name)
        .all()
    )
    return [
        {"category": name, "color": color, "icon": icon, "total": money(amount), "count": int(n)}
        for name, color, icon, amount, n in rows
    ]


def trends(months, today=None):
    today = today or date.today()
    since = months_before(today, months)
    year = extract("year", Transaction.transaction_date).label("year")
    month = extract("month", Transaction.transaction_date).label("month")
    rows = (
        db.session.query(year, month, _total_of("income"), _total_of("expense"))
        .filter(Transaction.transaction_date >= since)
        .group_by(year, month)
        .order_by(year, month)
        .all()
    )
    return [
        {"month": f"{int(y):04d}-{int(m):02d}", "income": money(income), "expenses": money(expenses)}
        for y, m, income, expenses in rows
    ]


@analytics_bp.route("/summary")
def summary_view():
    return jsonify(summary(request.args))


@analytics_bp.route("/by-category")
def by_category_view():
    return jsonify(by_category(request.args))


@analytics_bp.route("/trends")
def trends_view():
    months = parse_int(request.args.get("months"), "months", minimum=1)
    return jsonify(trends(months or DEFAULT_TREND_MONTHS))
