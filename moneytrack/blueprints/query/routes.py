from datetime import date, datetime
from decimal import Decimal
from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from ...extensions import db
from ...errors import ForbiddenQueryError, ValidationError, store_message
from ...formatting import iso

query_bp = Blueprint("query", __name__, url_prefix="/api/query")


def is_read_query(text):
    # Prefix check only: comments, stacked statements or engine quirks can still
    # smuggle writes past it, so it is not a security boundary.
    return text.strip().upper().startswith("SELECT")


def _cell(value):
    if isinstance(value, (date, datetime)):
        return iso(value)
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (bytes, memoryview)):
        return bytes(value).hex()
    return value


def run_query(text):
    """Execute ``text`` verbatim and roll its transaction back afterwards."""
    try:
        result = db.session.connection().exec_driver_sql(
            text, execution_options={"no_parameters": True}
        )
        if result.returns_rows:
            description = result.cursor.description or []
            fields = [{"name": col[0], "dataType": col[1]} for col in description]
            rows = [{key: _cell(value) for key, value in row._mapping.items()} for row in result]
            row_count = len(rows)
        else:
            fields, rows, row_count = [], [], result.rowcount
        return {"success": True, "rowCount": row_count, "rows": rows, "fields": fields}
    finally:
        db.session.rollback()


@query_bp.route("", methods=["POST"])
def execute_query():
    data = request.get_json(silent=True) or {}
    text = data.get("query") if isinstance(data, dict) else None
    if not text or not isinstance(text, str):
        raise ValidationError("Query is required")
    if not is_read_query(text):
        current_app.logger.warning("Rejected non-SELECT query: %.80s", text.strip())
        raise ForbiddenQueryError("Only SELECT queries are allowed for security reasons")
    try:
        payload = run_query(text)
    except SQLAlchemyError as exc:
        message = store_message(exc)
        current_app.logger.info("Ad-hoc query failed: %s", message)
        return jsonify({"success": False, "error": message}), 400
    return jsonify(payload)
