from flask import Blueprint, jsonify, request
from ...extensions import db
from ...errors import NotFoundError
from ...models import Category
from ...models.category import CATEGORY_TYPES, DEFAULT_COLOR, DEFAULT_ICON
from ...validation import json_body, parse_choice, parse_text

categories_bp = Blueprint("categories", __name__, url_prefix="/api/categories")


@categories_bp.route("", methods=["GET"])
def list_categories():
    cats = Category.query.order_by(Category.name).all()
    return jsonify([c.to_dict() for c in cats])


@categories_bp.route("", methods=["POST"])
def create_category():
    data = json_body(request)
    cat = Category(
        name=parse_text(data.get("name"), "name", required=True),
        type=parse_choice(data.get("type"), "type", CATEGORY_TYPES),
        color=parse_text(data.get("color"), "color") or DEFAULT_COLOR,
        icon=parse_text(data.get("icon"), "icon") or DEFAULT_ICON,
    )
    db.session.add(cat)
    db.session.commit()
    return jsonify(cat.to_dict()), 201


@categories_bp.route("/<int:category_id>", methods=["DELETE"])
def delete_category(category_id):
    cat = db.session.get(Category, category_id)
    if cat is None:
        raise NotFoundError("Category not found")
    db.session.delete(cat)
    db.session.commit()
    return jsonify({"message": "Category deleted successfully"})
