import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import insert, select
from sqlalchemy.dialects import postgresql, sqlite

from .extensions import db
from .models import Budget, Category, Transaction

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    ("Food & Dining", "expense", "#ef4444", "🍔"),
    ("Transportation", "expense", "#f59e0b", "🚗"),
    ("Shopping", "expense", "#ec4899", "🛍️"),
    ("Entertainment", "expense", "#8b5cf6", "🎬"),
    ("Bills & Utilities", "expense", "#06b6d4", "💡"),
    ("Healthcare", "expense", "#10b981", "🏥"),
    ("Salary", "income", "#22c55e", "💼"),
    ("Freelance", "income", "#3b82f6", "💻"),
    ("Investments", "income", "#14b8a6", "📈"),
    ("Other", "expense", "#64748b", "📦"),
]


def initialize_database(engine):
    """Create missing tables and seed the default categories in one transaction.

    Safe to run on every start: existing tables are left alone and seed
    categories are matched by name. Any failure rolls the whole unit back and
    is re-raised. Returns the number of categories inserted.
    """
    try:
        with engine.begin() as conn:
            db.metadata.create_all(bind=conn)
            existing = set(conn.execute(select(Category.name)).scalars())
            missing = [
                {"name": name, "type": ctype, "color": color, "icon": icon}
                for name, ctype, color, icon in DEFAULT_CATEGORIES
                if name not in existing
            ]
            if missing:
                conn.execute(_seed_insert(conn.dialect.name), missing)
    except Exception:
        logger.exception("Error initializing database")
        raise
    logger.info("Database initialized (%d default categories added)", len(missing))
    return len(missing)


def _seed_insert(dialect_name):
    # another process may seed the same names between our SELECT and INSERT
    if dialect_name == "postgresql":
        return postgresql.insert(Category.__table__).on_conflict_do_nothing(index_elements=["name"])
    if dialect_name == "sqlite":
        return sqlite.insert(Category.__table__).on_conflict_do_nothing(index_elements=["name"])
    return insert(Category.__table__)


def seed_demo(session, today=None):
    """Insert a month of sample transactions and one monthly budget.

    Does nothing when transactions already exist. Returns the number of
    transactions added.
    """
    today = today or date.today()
    if session.query(Transaction.id).first() is not None:
        return 0

    cats = {c.name: c for c in session.query(Category).all()}
    month_start = today.replace(day=1)
    demo = [
        ("Salary", "income", "4200.00", "Monthly salary"),
        ("Freelance", "income", "650.00", "Logo design"),
        ("Food & Dining", "expense", "42.80", "Dinner out"),
        ("Transportation", "expense", "60.00", "Transit pass"),
        ("Bills & Utilities", "expense", "118.35", "Electricity"),
        ("Shopping", "expense", "89.99", "Shoes"),
    ]
    added = 0
    for name, ttype, amount, description in demo:
        cat = cats.get(name)
        session.add(Transaction(
            amount=Decimal(amount),
            description=description,
            category_id=cat.id if cat else None,
            transaction_date=today,
            type=ttype,
        ))
        added += 1

    food = cats.get("Food & Dining")
    if food is not None:
        exists = session.query(Budget.id).filter_by(
            category_id=food.id, period="monthly", start_date=month_start
        ).first()
        if exists is None:
            session.add(Budget(
                category_id=food.id,
                amount=Decimal("400.00"),
                period="monthly",
                start_date=month_start,
                end_date=_month_end(month_start),
            ))
    session.commit()
    return added


def _month_end(month_start):
    if month_start.month == 12:
        next_month = month_start.replace(year=month_start.year + 1, month=1)
    else:
        next_month = month_start.replace(month=month_start.month + 1)
    return date.fromordinal(next_month.toordinal() - 1)
