"""Tests for request parsing and field validation."""

from datetime import datetime
from decimal import Decimal

import pytest

from isp_backoffice.errors import FieldValidation, MalformedRequest
from isp_backoffice.services.dto import (
    CreateContractRequest,
    CreatePaymentRequest,
    CustomerRequest,
    SubscriptionRequest,
    format_timestamp,
    parse_timestamp,
)


def test_parse_timestamp_normalizes_to_utc() -> None:
    assert parse_timestamp("2025-01-01T10:00:00Z") == datetime(2025, 1, 1, 10, 0, 0)
    assert parse_timestamp("2025-01-01T12:00:00+02:00") == datetime(2025, 1, 1, 10, 0, 0)
    assert parse_timestamp("2025-01-01") == datetime(2025, 1, 1)


def test_parse_timestamp_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_timestamp("yesterday")


def test_format_timestamp() -> None:
    assert format_timestamp(datetime(2025, 2, 1, 8, 30)) == "2025-02-01T08:30:00Z"
    assert format_timestamp(None) is None


def test_contract_request_parsed() -> None:
    request = CreateContractRequest.from_json(
        {
            "customer_id": 1,
            "subscription_id": 2,
            "start_date": "2025-01-01T00:00:00Z",
            "end_date": "2025-06-01T00:00:00Z",
        }
    )
    assert request.customer_id == 1
    assert request.end_date == datetime(2025, 6, 1)


def test_contract_request_collects_every_field_error() -> None:
    with pytest.raises(FieldValidation) as excinfo:
        CreateContractRequest.from_json(
            {"customer_id": "one", "start_date": "not a date", "end_date": "2025-06-01"}
        )
    errors = {e.field: e.field_errors for e in excinfo.value.field_errors}
    assert set(errors) == {"customer_id", "subscription_id", "start_date"}
    assert errors["subscription_id"] == ["This field is required"]


def test_non_object_body_is_malformed() -> None:
    with pytest.raises(MalformedRequest):
        CreatePaymentRequest.from_json([1, 2, 3])


def test_payment_amount_must_be_non_negative() -> None:
    with pytest.raises(FieldValidation) as excinfo:
        CreatePaymentRequest.from_json(
            {"invoice_id": 1, "payment_date": "2025-01-01T00:00:00Z", "amount": -5}
        )
    assert excinfo.value.field_errors[0].field == "amount"


def test_payment_amount_kept_as_decimal() -> None:
    request = CreatePaymentRequest.from_json(
        {"invoice_id": 1, "payment_date": "2025-01-01T00:00:00Z", "amount": 10.1}
    )
    assert request.amount == Decimal("10.1")


def test_boolean_is_not_an_id() -> None:
    with pytest.raises(FieldValidation):
        CreatePaymentRequest.from_json(
            {"invoice_id": True, "payment_date": "2025-01-01T00:00:00Z", "amount": 1}
        )


def test_customer_cnp_and_lengths() -> None:
    with pytest.raises(FieldValidation) as excinfo:
        CustomerRequest.from_json(
            {
                "name": "jo",
                "fullname": "John Doe",
                "address": "1 Main Street",
                "phone": "+40712345678",
                "cnp": "12345",
            }
        )
    fields = [e.field for e in excinfo.value.field_errors]
    assert fields == ["name", "cnp"]


def test_subscription_type_must_be_known() -> None:
    with pytest.raises(FieldValidation) as excinfo:
        SubscriptionRequest.from_json(
            {
                "description": "Plan",
                "type": "SATELLITE",
                "traffic": 10,
                "price": 5,
                "extra_traffic_price": 1,
            }
        )
    assert excinfo.value.field_errors[0].field == "type"


def _payment_errors(**overrides):
    body = {"invoice_id": 1, "payment_date": "2025-01-01T00:00:00Z", "amount": 1}
    body.update(overrides)
    with pytest.raises(FieldValidation) as excinfo:
        CreatePaymentRequest.from_json(body)
    return {e.field: e.field_errors for e in excinfo.value.field_errors}


@pytest.mark.parametrize("amount", ["99.996", 0.001, "1.005"])
def test_amount_limited_to_cents(amount) -> None:
    assert _payment_errors(amount=amount) == {"amount": ["At most 2 decimal places"]}


@pytest.mark.parametrize("amount", ["100.000", "100.10", 12, 0.5])
def test_amount_with_trailing_zeros_accepted(amount) -> None:
    request = CreatePaymentRequest.from_json(
        {"invoice_id": 1, "payment_date": "2025-01-01T00:00:00Z", "amount": amount}
    )
    assert request.amount == Decimal(str(amount))


@pytest.mark.parametrize("amount", ["1e20", 10_000_000_000_000])
def test_amount_must_fit_the_column(amount) -> None:
    assert _payment_errors(amount=amount) == {"amount": ["Must be less than 10000000000000"]}


def test_largest_amount_accepted() -> None:
    request = CreatePaymentRequest.from_json(
        {"invoice_id": 1, "payment_date": "2025-01-01T00:00:00Z", "amount": "9999999999999.99"}
    )
    assert request.amount == Decimal("9999999999999.99")


def test_id_above_unsigned_32_bit_rejected() -> None:
    assert _payment_errors(invoice_id=10**30) == {
        "invoice_id": ["Must be less than or equal to 4294967295"]
    }
    assert CreatePaymentRequest.from_json(
        {"invoice_id": 4294967295, "payment_date": "2025-01-01T00:00:00Z", "amount": 1}
    ).invoice_id == 4294967295


def test_subscription_price_limited_to_cents() -> None:
    with pytest.raises(FieldValidation) as excinfo:
        SubscriptionRequest.from_json(
            {
                "description": "Fiber",
                "type": "FIXED_INTERNET",
                "traffic": 1,
                "price": "9.999",
                "extra_traffic_price": 0,
            }
        )
    assert [e.field for e in excinfo.value.field_errors] == ["price"]
