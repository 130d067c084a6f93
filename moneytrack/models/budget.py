from ..extensions import db
from ..formatting import iso, money

BUDGET_PERIODS = ("monthly", "yearly")


class Budget(db.Model):
    __tablename__ = "budgets"
    id = db.Column(db.Integer, primary_key=True)
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id", ondelete="CASCADE"))
    amount = db.Column(db.Numeric(12, 2), nullable=False)
    period = db.Column(db.String(20), nullable=False)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.current_timestamp())

    __table_args__ = (
        db.UniqueConstraint("category_id", "period", "start_date", name="uq_budget_category_period_start"),
        db.CheckConstraint("period IN ('monthly', 'yearly')", name="ck_budgets_period"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "category_id": self.category_id,
            "amount": money(self.amount),
            "period": self.period,
            "start_date": iso(self.start_date),
            "end_date": iso(self.end_date),
            "created_at": iso(self.created_at),
        }
