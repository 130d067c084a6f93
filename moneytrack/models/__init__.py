from .category import Category
from .transaction import Transaction
from .budget import Budget

__all__ = ["Category", "Transaction", "Budget"]
