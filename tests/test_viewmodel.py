from moneytrack.viewmodel import DashboardView, budget_progress


def tx(amount, ttype="expense", category="Food & Dining", **extra):
    return {"amount": amount, "type": ttype, "category_name": category, **extra}


def test_totals_and_chart():
    view = DashboardView.from_payloads([], [
        tx("100.00", "income", "Salary"),
        tx("10.50"),
        tx("4.50"),
        tx("20.00", category="Shopping"),
        tx("5.00", category=None),
    ], [])
    assert str(view.total_income) == "100.00"
    assert str(view.total_expenses) == "40.00"
    assert str(view.balance) == "60.00"
    assert view.category_chart == {
        "labels": ["Food & Dining", "Shopping", "Uncategorized"],
        "data": [15.0, 20.0, 5.0],
    }


def test_recent_transactions_are_the_first_five():
    rows = [tx("1.00", id=i) for i in range(8)]
    view = DashboardView(categories=[], transactions=rows, budgets=[])
    assert [t["id"] for t in view.recent_transactions] == [0, 1, 2, 3, 4]


def test_budget_progress_caps_at_100():
    over = budget_progress({"amount": "50.00", "spent": "80.00"})
    assert over["percent"] == 100.0
    assert over["is_over"] is True

    under = budget_progress({"amount": "200.00", "spent": "50.00"})
    assert under["percent"] == 25.0
    assert under["is_over"] is False


def test_budget_progress_with_zero_limit():
    assert budget_progress({"amount": "0", "spent": "0"})["percent"] == 0.0
    assert budget_progress({"amount": "0", "spent": "1"})["percent"] == 100.0


def test_empty_payloads():
    data = DashboardView.from_payloads(None, None, None).to_dict()
    assert data["summary"] == {"total_income": "0.00", "total_expenses": "0.00", "balance": "0.00"}
    assert data["transactions"] == []
    assert data["category_chart"] == {"labels": [], "data": []}
