import pytest

from moneytrack import create_app
from moneytrack.config import TestConfig


@pytest.fixture
def app():
    return create_app(TestConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def categories(client):
    """Seeded categories keyed by name."""
    return {c["name"]: c for c in client.get("/api/categories").get_json()}


@pytest.fixture
def add_transaction(client, categories):
    def _add(amount="10.00", type="expense", category="Food & Dining", **fields):
        payload = {
            "amount": amount,
            "type": type,
            "category_id": categories[category]["id"] if category else None,
            "description": fields.pop("description", None),
        }
        payload.update(fields)
        resp = client.post("/api/transactions", json=payload)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()

    return _add


@pytest.fixture
def add_budget(client, categories):
    def _add(category="Food & Dining", amount="500.00", period="monthly",
             start_date="2024-01-01", end_date="2024-01-31"):
        resp = client.post("/api/budgets", json={
            "category_id": categories[category]["id"],
            "amount": amount,
            "period": period,
            "start_date": start_date,
            "end_date": end_date,
        })
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()

    return _add
