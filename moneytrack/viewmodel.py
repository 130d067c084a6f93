"""Dashboard view-model.

The dashboard never keeps entity lists in loose globals: every refresh builds a
fresh :class:`DashboardView` from the category, transaction and budget payloads
served by the JSON API, and the page renders from that object alone.
"""
from decimal import Decimal

from .formatting import money, to_decimal

RECENT_LIMIT = 5
UNCATEGORIZED = "Uncategorized"


def budget_progress(budget):
    """Percent of the limit used, capped at 100, and whether the limit was passed."""
    spent = to_decimal(budget.get("spent"))
    limit = to_decimal(budget.get("amount"))
    if limit > 0:
        percent = min(spent / limit * 100, Decimal(100))
    else:
        percent = Decimal(100) if spent > 0 else Decimal(0)
    return {
        **budget,
        "percent": float(percent.quantize(Decimal("0.1"))),
        "is_over": spent > limit,
    }


class DashboardView:
    def __init__(self, categories, transactions, budgets):
        self.categories = list(categories)
        self.transactions = list(transactions)
        self.budgets = [budget_progress(b) for b in budgets]

        income = expenses = Decimal(0)
        by_category = {}
        for tx in self.transactions:
            amount = to_decimal(tx.get("amount"))
            if tx.get("type") == "income":
                income += amount
            else:
                expenses += amount
                label = tx.get("category_name") or UNCATEGORIZED
                by_category[label] = by_category.get(label, Decimal(0)) + amount
        self.total_income = income
        self.total_expenses = expenses
        self.balance = income - expenses
        self.expenses_by_category = by_category

    @classmethod
    def from_payloads(cls, categories, transactions, budgets):
        return cls(categories or [], transactions or [], budgets or [])

    @property
    def recent_transactions(self):
        return self.transactions[:RECENT_LIMIT]

    @property
    def category_chart(self):
        return {
            "labels": list(self.expenses_by_category),
            "data": [float(v) for v in self.expenses_by_category.values()],
        }

    def to_dict(self):
        return {
            "summary": {
                "total_income": money(self.total_income),
                "total_expenses": money(self.total_expenses),
                "balance": money(self.balance),
            },
            "categories": self.categories,
            "transactions": self.transactions,
            "recent_transactions": self.recent_transactions,
            "budgets": self.budgets,
            "category_chart": self.category_chart,
        }
