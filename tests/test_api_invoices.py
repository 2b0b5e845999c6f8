"""API tests for invoices: contract window, defaults, updates."""

from tests.conftest import future


def test_create_invoice_defaults_to_unpaid(client, make_contract) -> None:
    contract = make_contract()
    body = {
        "contract_id": contract["id"],
        "issue_date": future(2),
        "due_date": future(30),
        "amount": 100,
    }
    response = client.post("/api/invoice", json=body)
    assert response.status_code == 201
    invoice = response.get_json()
    assert invoice["status"] == "UNPAID"
    assert invoice["paid_amount"] == 0
    assert invoice["amount"] == 100
    assert invoice["issue_date"] == body["issue_date"]

    assert client.get(f"/api/invoice/{invoice['id']}").get_json() == invoice


def test_invoice_for_missing_contract(client) -> None:
    response = client.post(
        "/api/invoice",
        json={"contract_id": 5, "issue_date": future(1), "due_date": future(2), "amount": 1},
    )
    assert response.status_code == 404
    assert response.get_json()["message"] == "Contract 5 not found"


def test_invoice_due_after_contract_end(app, client, make_contract) -> None:
    app.config["ENFORCE_FUTURE_DATES"] = False
    contract = make_contract(
        start_date="2025-01-01T00:00:00Z", end_date="2025-06-01T00:00:00Z"
    )
    response = client.post(
        "/api/invoice",
        json={
            "contract_id": contract["id"],
            "issue_date": "2025-02-01T00:00:00Z",
            "due_date": "2025-07-01T00:00:00Z",
            "amount": 100,
        },
    )
    assert response.status_code == 400
    assert response.get_json() == {
        "message": "Invoice period must fall within the contract period",
        "errors": None,
    }


def test_invoice_issue_before_contract_start(client, make_contract) -> None:
    contract = make_contract(start_date=future(10), end_date=future(100))
    response = client.post(
        "/api/invoice",
        json={
            "contract_id": contract["id"],
            "issue_date": future(5),
            "due_date": future(20),
            "amount": 10,
        },
    )
    assert response.status_code == 400


def test_invoice_issue_after_due(client, make_contract) -> None:
    contract = make_contract()
    response = client.post(
        "/api/invoice",
        json={
            "contract_id": contract["id"],
            "issue_date": future(20),
            "due_date": future(5),
            "amount": 10,
        },
    )
    assert response.status_code == 400
    assert response.get_json()["message"] == "Issue date should be earlier than due date"


def test_invoice_on_contract_bounds(client, make_contract) -> None:
    start, end = future(1), future(60)
    contract = make_contract(start_date=start, end_date=end)
    response = client.post(
        "/api/invoice",
        json={"contract_id": contract["id"], "issue_date": start, "due_date": end, "amount": 10},
    )
    assert response.status_code == 201


def test_update_invoice_before_payment(client, make_invoice) -> None:
    invoice = make_invoice(amount=100)
    body = {"issue_date": future(3), "due_date": future(40), "amount": 120}
    response = client.put(f"/api/invoice/{invoice['id']}", json=body)
    assert response.status_code == 200
    updated = response.get_json()
    assert updated["amount"] == 120
    assert updated["due_date"] == body["due_date"]
    assert updated["status"] == "UNPAID"


def test_update_invoice_outside_contract(client, make_invoice) -> None:
    invoice = make_invoice()
    response = client.put(
        f"/api/invoice/{invoice['id']}",
        json={"issue_date": future(3), "due_date": future(400), "amount": 10},
    )
    assert response.status_code == 400


def test_update_invoice_after_payment_rejected(client, make_invoice) -> None:
    invoice = make_invoice(amount=100)
    paid = client.post(
        "/api/payment",
        json={"invoice_id": invoice["id"], "payment_date": future(3), "amount": 10},
    )
    assert paid.status_code == 201

    response = client.put(
        f"/api/invoice/{invoice['id']}",
        json={"issue_date": future(2), "due_date": future(30), "amount": 50},
    )
    assert response.status_code == 400
    assert response.get_json()["message"] == "An invoice with recorded payments cannot be modified"
    assert client.get(f"/api/invoice/{invoice['id']}").get_json()["amount"] == 100


def test_delete_invoice(client, make_invoice) -> None:
    invoice = make_invoice()
    assert client.delete(f"/api/invoice/{invoice['id']}").status_code == 204
    assert client.get(f"/api/invoice/{invoice['id']}").status_code == 404


def test_delete_invoice_with_payments_restricted(client, make_invoice) -> None:
    invoice = make_invoice(amount=100)
    client.post(
        "/api/payment",
        json={"invoice_id": invoice["id"], "payment_date": future(3), "amount": 10},
    )
    response = client.delete(f"/api/invoice/{invoice['id']}")
    assert response.status_code == 400
    assert response.get_json()["message"] == (
        f"Invoice {invoice['id']} cannot be deleted while it has payments"
    )


def test_list_invoices(client, make_invoice) -> None:
    first = make_invoice()
    second = make_invoice()
    assert [i["id"] for i in client.get("/api/invoice").get_json()] == [first["id"], second["id"]]


def test_payments_of_missing_invoice(client) -> None:
    assert client.get("/api/invoice/77/payment").status_code == 404


def test_invoice_amount_limited_to_cents(client, make_contract) -> None:
    contract = make_contract()
    response = client.post(
        "/api/invoice",
        json={
            "contract_id": contract["id"],
            "issue_date": future(2),
            "due_date": future(30),
            "amount": "100.005",
        },
    )
    assert response.status_code == 400
    assert response.get_json()["errors"] == [
        {"field": "amount", "field_errors": ["At most 2 decimal places"]}
    ]


def test_huge_id_in_path_is_not_found(client) -> None:
    response = client.get(f"/api/invoice/{10**30}")
    assert response.status_code == 404
    assert client.get(f"/api/invoice/{10**30}/payment").status_code == 404
