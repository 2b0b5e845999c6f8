"""Guarded balance updates of InvoiceRepository against a real session."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from isp_backoffice.extensions import db
from isp_backoffice.models import Contract, Customer, Invoice, Subscription
from isp_backoffice.repositories import InvoiceRepository


@pytest.fixture
def invoice_id(app):
    now = datetime.utcnow()
    with app.app_context():
        customer = Customer(
            name="repo", fullname="Repo Test", address="Somewhere 1",
            phone="0722000000", cnp="1900101000000",
        )
        subscription = Subscription(
            description="Fiber", subscription_type="FIXED_INTERNET", traffic=1,
            price=Decimal("10"), extra_traffic_price=Decimal("0"),
        )
        db.session.add_all([customer, subscription])
        db.session.flush()
        contract = Contract(
            customer_id=customer.id, subscription_id=subscription.id,
            start_date=now, end_date=now + timedelta(days=30),
        )
        db.session.add(contract)
        db.session.flush()
        invoice = Invoice(
            contract_id=contract.id, issue_date=now, due_date=now + timedelta(days=10),
            amount=Decimal("100.00"),
        )
        db.session.add(invoice)
        db.session.commit()
        return invoice.id


def test_partial_payment_keeps_invoice_unpaid(app, invoice_id) -> None:
    with app.app_context():
        repo = InvoiceRepository(db.session)
        assert repo.apply_payment(invoice_id, Decimal("60")) is True
        db.session.commit()

        invoice = repo.get_by_id(invoice_id)
        assert invoice.paid_amount == Decimal("60")
        assert invoice.status == "UNPAID"


def test_reaching_amount_marks_paid(app, invoice_id) -> None:
    with app.app_context():
        repo = InvoiceRepository(db.session)
        assert repo.apply_payment(invoice_id, Decimal("60")) is True
        assert repo.apply_payment(invoice_id, Decimal("40")) is True
        db.session.commit()

        assert repo.get_by_id(invoice_id).status == "PAID"
        assert repo.apply_payment(invoice_id, Decimal("0.01")) is False


def test_overpay_leaves_row_untouched(app, invoice_id) -> None:
    with app.app_context():
        repo = InvoiceRepository(db.session)
        assert repo.apply_payment(invoice_id, Decimal("100.01")) is False

        invoice = repo.get_by_id(invoice_id)
        assert invoice.paid_amount == Decimal("0")
        assert invoice.status == "UNPAID"


def test_missing_invoice_is_not_touched(app) -> None:
    with app.app_context():
        assert InvoiceRepository(db.session).apply_payment(999, Decimal("1")) is False


def test_update_refused_after_payment(app, invoice_id) -> None:
    with app.app_context():
        repo = InvoiceRepository(db.session)
        assert repo.update_if_unpaid(invoice_id, {"amount": Decimal("80")}) is True
        assert repo.apply_payment(invoice_id, Decimal("10")) is True
        assert repo.update_if_unpaid(invoice_id, {"amount": Decimal("90")}) is False
        assert repo.get_by_id(invoice_id).amount == Decimal("80")


def test_cent_payments_reach_paid_exactly(app, invoice_id) -> None:
    with app.app_context():
        repo = InvoiceRepository(db.session)
        repo.update_if_unpaid(invoice_id, {"amount": Decimal("0.30")})
        assert repo.apply_payment(invoice_id, Decimal("0.10")) is True
        assert repo.apply_payment(invoice_id, Decimal("0.20")) is True
        db.session.commit()

        invoice = repo.get_by_id(invoice_id)
        assert invoice.paid_amount == Decimal("0.30")
        assert invoice.status == "PAID"


def test_ids_outside_key_range_are_absent(app) -> None:
    with app.app_context():
        repo = InvoiceRepository(db.session)
        assert repo.get_by_id(10**30) is None
        assert repo.get_by_id(0) is None
