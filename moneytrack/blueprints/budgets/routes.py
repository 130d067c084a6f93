from flask import Blueprint, jsonify, request
from sqlalchemy import and_, func
from ...extensions import db
from ...errors import ValidationError
from ...formatting import money
from ...models import Budget, Category, Transaction
from ...models.budget import BUDGET_PERIODS
from ...validation import json_body, parse_amount, parse_choice, parse_date, parse_int

budgets_bp = Blueprint("budgets", __name__, url_prefix="/api/budgets")


def list_budget_rows():
    """Every budget with its category and the expenses booked against it in its window."""
    spent = func.coalesce(func.sum(Transaction.amount), 0).label("spent")
    rows = (
        db.session.query(Budget, Category.name, Category.color, Category.icon, spent)
        .outerjoin(Category, Budget.category_id == Category.id)
        .outerjoin(
            Transaction,
            and_(
                Transaction.category_id == Budget.category_id,
                Transaction.transaction_date.between(Budget.start_date, Budget.end_date),
                Transaction.type == "expense",
            ),
        )
        .group_by(Budget.id, Category.name, Category.color, Category.icon)
        .order_by(Budget.start_date.desc(), Budget.id.desc())
        .all()
    )
    view = []
    for budget, name, color, icon, total in rows:
        row = budget.to_dict()
        row.update({"category_name": name, "color": color, "icon": icon, "spent": money(total)})
        view.append(row)
    return view


@budgets_bp.route("", methods=["GET"])
def list_budgets():
    return jsonify(list_budget_rows())


@budgets_bp.route("", methods=["POST"])
def create_budget():
    data = json_body(request)
    start_date = parse_date(data.get("start_date"), "start_date", required=True)
    end_date = parse_date(data.get("end_date"), "end_date", required=True)
    if end_date < start_date:
        raise ValidationError("end_date must not be before start_date")
    budget = Budget(
        category_id=parse_int(data.get("category_id"), "category_id", required=True),
        amount=parse_amount(data.get("amount")),
        period=parse_choice(data.get("period"), "period", BUDGET_PERIODS),
        start_date=start_date,
        end_date=end_date,
    )
    db.session.add(budget)
    db.session.commit()
    return jsonify(budget.to_dict()), 201
