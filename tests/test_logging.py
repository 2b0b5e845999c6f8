"""JSON log records and request ids."""

import json
import logging
from decimal import Decimal

from isp_backoffice.extensions import JsonFormatter, RequestContextFilter


def _render(record: logging.LogRecord) -> dict:
    RequestContextFilter().filter(record)
    return json.loads(JsonFormatter().format(record))


def test_request_fields_and_domain_keys_are_top_level(app) -> None:
    with app.test_request_context(
        "/api/payment", method="POST", headers={"X-Request-ID": "req-42"}
    ):
        app.preprocess_request()
        record = logging.makeLogRecord(
            {
                "name": "isp_backoffice.events",
                "msg": "create_payment completed",
                "action": "create_payment",
                "amount": Decimal("60.00"),
            }
        )
        entry = _render(record)

    assert entry["request_id"] == "req-42"
    assert entry["method"] == "POST"
    assert entry["path"] == "/api/payment"
    assert entry["action"] == "create_payment"
    assert entry["message"] == "create_payment completed"
    assert entry["extra"] == {"amount": "60.00"}


def test_records_outside_requests_have_no_request_fields() -> None:
    entry = _render(logging.makeLogRecord({"name": "manage_cli", "msg": "Database created."}))
    assert "request_id" not in entry
    assert "extra" not in entry
    assert entry["logger"] == "manage_cli"


def test_rule_violation_is_logged_with_its_rule() -> None:
    record = logging.makeLogRecord(
        {"msg": "Request rejected", "rule": "payment_overpay", "error_kind": "business_rule"}
    )
    entry = _render(record)
    assert entry["rule"] == "payment_overpay"
    assert entry["error_kind"] == "business_rule"


def test_request_id_echoed_or_generated(client) -> None:
    echoed = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert echoed.headers["X-Request-ID"] == "abc123"

    generated = client.get("/health").headers["X-Request-ID"]
    assert len(generated) == 32
    assert generated != client.get("/health").headers["X-Request-ID"]


def test_error_responses_carry_request_id(client) -> None:
    response = client.get("/api/customer/5", headers={"X-Request-ID": "missing-customer"})
    assert response.status_code == 404
    assert response.headers["X-Request-ID"] == "missing-customer"
