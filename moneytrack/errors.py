from flask import jsonify, request
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from werkzeug.exceptions import NotFound

from .extensions import db


class ApiError(Exception):
    """Error raised by a request handler and rendered as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"error": self.message}


class ValidationError(ApiError):
    status_code = 400


class ForbiddenQueryError(ApiError):
    status_code = 403


class NotFoundError(ApiError):
    status_code = 404


class StoreError(ApiError):
    status_code = 500

    @classmethod
    def from_exception(cls, exc):
        return cls(store_message(exc))


def store_message(exc):
    """Return the database driver's own message for ``exc`` when there is one."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig).strip()
    return str(exc)


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(err):
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(exc):
        db.session.rollback()
        err = StoreError.from_exception(exc)
        app.logger.error("Store error on %s %s: %s", request.method, request.path, err.message)
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(NotFound)
    def handle_not_found(exc):
        if request.path.startswith("/api/"):
            return jsonify({"error": "Not found"}), 404
        return exc
