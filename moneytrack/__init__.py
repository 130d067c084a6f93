import logging

from flask import Flask
from .extensions import db, migrate
from .config import Config
from .bootstrap import initialize_database
from .cli import register_commands
from .errors import register_error_handlers

from .blueprints.health.routes import health_bp
from .blueprints.categories.routes import categories_bp
from .blueprints.transactions.routes import transactions_bp
from .blueprints.budgets.routes import budgets_bp
from .blueprints.analytics.routes import analytics_bp
from .blueprints.query.routes import query_bp
from .blueprints.dashboard.routes import dashboard_bp


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)

    # Tables and default categories must be in place before serving; failures abort startup
    if app.config.get("BOOTSTRAP_ON_STARTUP", True):
        with app.app_context():
            initialize_database(db.engine)

    register_error_handlers(app)
    register_commands(app)

    # Register blueprints
    app.register_blueprint(health_bp)
    app.register_blueprint(categories_bp)
    app.register_blueprint(transactions_bp)
    app.register_blueprint(budgets_bp)
    app.register_blueprint(analytics_bp)
    app.register_blueprint(query_bp)
    app.register_blueprint(dashboard_bp)

    return app
