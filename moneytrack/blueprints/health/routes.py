from flask import Blueprint, current_app, jsonify
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from ...extensions import db
from ...errors import store_message
from ...formatting import iso

health_bp = Blueprint("health", __name__, url_prefix="/api/health")


@health_bp.route("")
def health():
    try:
        now = db.session.execute(select(func.current_timestamp())).scalar()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error("Health check failed: %s", store_message(exc))
        return jsonify({
            "status": "unhealthy",
            "database": "disconnected",
            "error": store_message(exc),
        }), 500
    return jsonify({"status": "healthy", "database": "connected", "timestamp": iso(now)})
