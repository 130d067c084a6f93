from flask import Blueprint, jsonify, render_template
from ...models import Category
from ...viewmodel import DashboardView
from ..budgets.routes import list_budget_rows
from ..transactions.routes import list_transaction_rows


dashboard_bp = Blueprint("dashboard", __name__)


def build_view():
    categories = [c.to_dict() for c in Category.query.order_by(Category.name).all()]
    return DashboardView.from_payloads(categories, list_transaction_rows({}), list_budget_rows())


@dashboard_bp.route("/")
def index():
    return render_template("dashboard/index.html", view=build_view())


@dashboard_bp.route("/dashboard/state")
def state():
    return jsonify(build_view().to_dict())
