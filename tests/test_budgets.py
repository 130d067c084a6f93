def test_spent_sums_expenses_inside_the_window(client, add_transaction, add_budget):
    budget = add_budget(amount="100.00", start_date="2024-01-01", end_date="2024-01-31")
    add_transaction(amount="10.00", transaction_date="2024-01-01")
    add_transaction(amount="20.50", transaction_date="2024-01-15")
    add_transaction(amount="5.25", transaction_date="2024-01-31")
    # outside the window, wrong type, other category
    add_transaction(amount="1000.00", transaction_date="2024-02-01")
    add_transaction(amount="1000.00", transaction_date="2023-12-31")
    add_transaction(amount="1000.00", transaction_date="2024-01-10", type="income")
    add_transaction(amount="1000.00", transaction_date="2024-01-10", category="Shopping")

    rows = client.get("/api/budgets").get_json()
    assert len(rows) == 1
    row = rows[0]
    assert row["id"] == budget["id"]
    assert row["spent"] == "35.75"
    assert row["amount"] == "100.00"
    assert row["category_name"] == "Food & Dining"
    assert row["icon"] == "🍔"


def test_budget_without_matches_reports_zero(client, add_budget):
    add_budget(category="Healthcare")
    assert client.get("/api/budgets").get_json()[0]["spent"] == "0.00"


def test_budgets_are_ordered_by_start_date_desc(client, add_budget):
    jan = add_budget(start_date="2024-01-01", end_date="2024-01-31")
    mar = add_budget(start_date="2024-03-01", end_date="2024-03-31")
    year = add_budget(period="yearly", start_date="2023-01-01", end_date="2023-12-31")
    ids = [b["id"] for b in client.get("/api/budgets").get_json()]
    assert ids == [mar["id"], jan["id"], year["id"]]


def test_duplicate_budget_fails(client, categories, add_budget):
    add_budget()
    resp = client.post("/api/budgets", json={
        "category_id": categories["Food & Dining"]["id"],
        "amount": "200.00",
        "period": "monthly",
        "start_date": "2024-01-01",
        "end_date": "2024-01-31",
    })
    assert resp.status_code == 500
    assert "error" in resp.get_json()
    assert len(client.get("/api/budgets").get_json()) == 1


def test_same_start_with_other_period_is_allowed(add_budget):
    add_budget(period="monthly")
    add_budget(period="yearly", end_date="2024-12-31")


def test_create_budget_validates_input(client, categories):
    base = {
        "category_id": categories["Shopping"]["id"],
        "amount": "50",
        "period": "monthly",
        "start_date": "2024-05-01",
        "end_date": "2024-05-31",
    }
    assert client.post("/api/budgets", json={**base, "period": "weekly"}).status_code == 400
    assert client.post("/api/budgets", json={**base, "end_date": "2024-04-30"}).status_code == 400
    assert client.post("/api/budgets", json={**base, "category_id": None}).status_code == 400
    assert client.post("/api/budgets", json={**base, "start_date": None}).status_code == 400
    assert client.post("/api/budgets", data="not json").status_code == 400
