from datetime import date
from flask import Blueprint, jsonify, request
from ...extensions import db
from ...errors import NotFoundError
from ...filters import transaction_filters
from ...models import Category, Transaction
from ...models.transaction import TRANSACTION_TYPES
from ...validation import json_body, parse_amount, parse_choice, parse_date, parse_int, parse_text

transactions_bp = Blueprint("transactions", __name__, url_prefix="/api/transactions")


def _row_dict(tx, category_name, color, icon):
    row = tx.to_dict()
    row.update({"category_name": category_name, "color": color, "icon": icon})
    return row


def list_transaction_rows(args):
    rows = (
        db.session.query(Transaction, Category.name, Category.color, Category.icon)
        .outerjoin(Category, Transaction.category_id == Category.id)
        .filter(*transaction_filters(args))
        .order_by(Transaction.transaction_date.desc(), Transaction.created_at.desc(), Transaction.id.desc())
        .all()
    )
    return [_row_dict(*row) for row in rows]


def _fields(data, default_date=None):
    on_date = parse_date(data.get("transaction_date"), "transaction_date", required=default_date is None)
    return {
        "amount": parse_amount(data.get("amount")),
        "description": parse_text(data.get("description"), "description"),
        "category_id": parse_int(data.get("category_id"), "category_id"),
        "transaction_date": on_date or default_date,
        "type": parse_choice(data.get("type"), "type", TRANSACTION_TYPES),
    }


@transactions_bp.route("", methods=["GET"])
def list_transactions():
    return jsonify(list_transaction_rows(request.args))


@transactions_bp.route("", methods=["POST"])
def create_transaction():
    tx = Transaction(**_fields(json_body(request), default_date=date.today()))
    db.session.add(tx)
    db.session.commit()
    return jsonify(tx.to_dict()), 201


@transactions_bp.route("/<int:transaction_id>", methods=["PUT"])
def update_transaction(transaction_id):
    fields = _fields(json_body(request))
    tx = db.session.get(Transaction, transaction_id)
    if tx is None:
        raise NotFoundError("Transaction not found")
    for key, value in fields.items():
        setattr(tx, key, value)
    tx.updated_at = db.func.current_timestamp()
    db.session.commit()
    return jsonify(tx.to_dict())


@transactions_bp.route("/<int:transaction_id>", methods=["DELETE"])
def delete_transaction(transaction_id):
    tx = db.session.get(Transaction, transaction_id)
    if tx is None:
        raise NotFoundError("Transaction not found")
    db.session.delete(tx)
    db.session.commit()
    return jsonify({"message": "Transaction deleted successfully"})
