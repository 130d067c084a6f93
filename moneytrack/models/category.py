from ..extensions import db
from ..formatting import iso

DEFAULT_COLOR = "#6366f1"
DEFAULT_ICON = "💰"
CATEGORY_TYPES = ("expense", "income")


class Category(db.Model):
    __tablename__ = "categories"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, unique=True)
    type = db.Column(db.String(20), nullable=False)
    color = db.Column(db.String(7), default=DEFAULT_COLOR)
    icon = db.Column(db.String(50), default=DEFAULT_ICON)
    created_at = db.Column(db.DateTime, server_default=db.func.current_timestamp())

    # Mirrors ON DELETE SET NULL / CASCADE for engines that do not enforce foreign keys
    transactions = db.relationship("Transaction", backref="category", lazy=True)
    budgets = db.relationship("Budget", backref="category", lazy=True, cascade="all, delete-orphan")

    __table_args__ = (
        db.CheckConstraint("type IN ('expense', 'income')", name="ck_categories_type"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "color": self.color,
            "icon": self.icon,
            "created_at": iso(self.created_at),
        }
