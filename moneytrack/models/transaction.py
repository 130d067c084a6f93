from datetime import date

from ..extensions import db
from ..formatting import iso, money

TRANSACTION_TYPES = ("expense", "income")


class Transaction(db.Model):
    __tablename__ = "transactions"
    id = db.Column(db.Integer, primary_key=True)
    amount = db.Column(db.Numeric(12, 2), nullable=False)
    description = db.Column(db.Text)
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id", ondelete="SET NULL"))
    transaction_date = db.Column(db.Date, nullable=False, default=date.today)
    type = db.Column(db.String(20), nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.current_timestamp())
    updated_at = db.Column(db.DateTime, server_default=db.func.current_timestamp())

    __table_args__ = (
        db.CheckConstraint("type IN ('expense', 'income')", name="ck_transactions_type"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "amount": money(self.amount),
            "description": self.description,
            "category_id": self.category_id,
            "transaction_date": iso(self.transaction_date),
            "type": self.type,
            "created_at": iso(self.created_at),
            "updated_at": iso(self.updated_at),
        }
