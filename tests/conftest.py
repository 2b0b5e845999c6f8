"""Shared fixtures: app on in-memory SQLite, test client, entity builders."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from config import TestConfig
from isp_backoffice import create_app
from isp_backoffice.extensions import db


def iso(value: datetime) -> str:
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


def future(days: int = 1, hours: int = 0) -> str:
    """Timestamp ``days`` from now, formatted like the API expects."""
    now = datetime.now(timezone.utc).replace(microsecond=0)
    return iso(now + timedelta(days=days, hours=hours))


@pytest.fixture
def app(tmp_path):
    class _Config(TestConfig):
        LOG_DIR = str(tmp_path / "logs")

    app = create_app(_Config)
    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_customer(client):
    def _make(**overrides):
        body = {
            "name": "jdoe",
            "fullname": "John Doe",
            "address": "1 Main Street",
            "phone": "+40712345678",
            "cnp": "1900101123456",
        }
        body.update(overrides)
        response = client.post("/api/customer", json=body)
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _make


@pytest.fixture
def make_subscription(client):
    def _make(**overrides):
        body = {
            "description": "Fiber 1000",
            "type": "FIXED_INTERNET",
            "traffic": 1000,
            "price": 49.9,
            "extra_traffic_price": 0,
        }
        body.update(overrides)
        response = client.post("/api/subscription", json=body)
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _make


@pytest.fixture
def make_contract(client, make_customer, make_subscription):
    def _make(start_date=None, end_date=None):
        customer = make_customer()
        subscription = make_subscription()
        response = client.post(
            "/api/contract",
            json={
                "customer_id": customer["id"],
                "subscription_id": subscription["id"],
                "start_date": start_date or future(1),
                "end_date": end_date or future(365),
            },
        )
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _make


@pytest.fixture
def make_invoice(client, make_contract):
    def _make(amount=100, contract=None, issue_date=None, due_date=None):
        contract = contract or make_contract()
        response = client.post(
            "/api/invoice",
            json={
                "contract_id": contract["id"],
                "issue_date": issue_date or future(2),
                "due_date": due_date or future(30),
                "amount": amount,
            },
        )
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _make
