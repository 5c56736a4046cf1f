"""Route tests for the income, expense and budget JSON endpoints."""

from __future__ import annotations


def _post_income(client, **overrides):
    payload = {
        "type": "salary",
        "category": "base",
        "amount": "90000",
        "date": "2024-01-05",
        "notes": "January salary",
    }
    payload.update(overrides)
    return client.post("/api/income", json=payload)


def test_create_and_list_income(client):
    response = _post_income(client)
    assert response.status_code == 201
    created = response.get_json()
    assert created["amount"] == "90000.00"
    assert created["date"] == "2024-01-05"
    assert created["isPlanned"] is False
    assert created["ownerId"] == "demo-user-id"
    assert created["categoryLabel"] == "Base salary"

    _post_income(client, amount="1000", date="2024-03-01", type="investment", category="dividend")

    listed = client.get("/api/income").get_json()
    assert [r["date"] for r in listed] == ["2024-03-01", "2024-01-05"]


def test_list_income_date_range(client):
    for day in ("2024-01-01", "2024-01-31", "2024-02-01"):
        _post_income(client, date=day)

    listed = client.get("/api/income?startDate=2024-01-01&endDate=2024-01-31").get_json()
    assert sorted(r["date"] for r in listed) == ["2024-01-01", "2024-01-31"]


def test_invalid_date_range_parameter(client):
    response = client.get("/api/income?startDate=someday")
    assert response.status_code == 400
    assert "startDate" in response.get_json()["details"]


def test_income_rejects_category_from_another_type(client):
    response = _post_income(client, type="business", category="dividend")
    assert response.status_code == 400
    body = response.get_json()
    assert "category" in body["details"]
    assert client.get("/api/income").get_json() == []


def test_income_rejects_missing_fields(client):
    response = client.post("/api/income", json={"type": "salary"})
    assert response.status_code == 400
    details = response.get_json()["details"]
    assert {"category", "amount", "date"} <= set(details)


def test_income_rejects_non_object_body(client):
    response = client.post("/api/income", json=[1, 2, 3])
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_partial_update_income(client):
    record = _post_income(client).get_json()

    response = client.put(f"/api/income/{record['id']}", json={"amount": "95000"})
    assert response.status_code == 200
    updated = response.get_json()
    assert updated["amount"] == "95000.00"
    assert updated["notes"] == "January salary"
    assert updated["date"] == "2024-01-05"


def test_update_income_validates_merged_record(client):
    record = _post_income(client).get_json()
    response = client.put(f"/api/income/{record['id']}", json={"category": "dividend"})
    assert response.status_code == 400


def test_update_and_delete_missing_income_return_404(client):
    response = client.put("/api/income/missing", json={"amount": "1"})
    assert response.status_code == 404
    assert response.get_json()["error"] == "Income record not found"
    assert client.delete("/api/income/missing").status_code == 404


def test_delete_income(client):
    record = _post_income(client).get_json()
    response = client.delete(f"/api/income/{record['id']}")
    assert response.status_code == 200
    assert response.get_json() == {"success": True}
    assert client.get("/api/income").get_json() == []


def test_expense_crud_and_category_filter(client):
    first = client.post(
        "/api/expenses",
        json={"category": "living", "amount": 120.5, "date": "2024-01-03", "description": "Groceries"},
    )
    assert first.status_code == 201
    client.post("/api/expenses", json={"category": "loan", "amount": 22478, "date": "2024-01-10"})

    living = client.get("/api/expenses?category=living").get_json()
    assert [r["description"] for r in living] == ["Groceries"]
    assert living[0]["amount"] == "120.50"
    assert living[0]["icon"] == "fas fa-utensils"

    expense_id = first.get_json()["id"]
    updated = client.put(f"/api/expenses/{expense_id}", json={"notes": "weekly shop"}).get_json()
    assert updated["notes"] == "weekly shop"
    assert updated["category"] == "living"

    assert client.delete(f"/api/expenses/{expense_id}").status_code == 200
    assert len(client.get("/api/expenses").get_json()) == 1


def test_expense_rejects_unknown_category(client):
    response = client.post(
        "/api/expenses", json={"category": "yachts", "amount": 1, "date": "2024-01-03"}
    )
    assert response.status_code == 400
    assert "category" in response.get_json()["details"]


def test_budget_crud(client):
    created = client.post("/api/budgets", json={"category": "living", "amount": 20000})
    assert created.status_code == 201
    budget = created.get_json()
    assert budget["period"] == "monthly"

    updated = client.put(f"/api/budgets/{budget['id']}", json={"period": "yearly"}).get_json()
    assert updated["period"] == "yearly"
    assert updated["amount"] == "20000.00"

    assert len(client.get("/api/budgets").get_json()) == 1
    assert client.delete(f"/api/budgets/{budget['id']}").status_code == 200
    assert client.delete(f"/api/budgets/{budget['id']}").status_code == 404


def test_budget_rejects_bad_period(client):
    response = client.post("/api/budgets", json={"category": "living", "amount": 1, "period": "daily"})
    assert response.status_code == 400
    assert "period" in response.get_json()["details"]
