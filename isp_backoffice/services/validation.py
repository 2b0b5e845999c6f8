"""
Referential checks run before a dependent row is created.

Each helper resolves a foreign key through the Unit of Work repositories and
returns the parent row, or raises ReferenceNotFound carrying the dangling id.
"""

from __future__ import annotations

from datetime import datetime, timezone

from flask import current_app

from isp_backoffice.errors import ReferenceNotFound
from isp_backoffice.models import Contract, Customer, Invoice, Subscription
from isp_backoffice.services.unit_of_work import UnitOfWork


def utcnow() -> datetime:
    """Current time as naive UTC, the representation stored in the database."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def future_dates_enforced() -> bool:
    return bool(current_app.config.get("ENFORCE_FUTURE_DATES", True))


def require_customer(uow: UnitOfWork, customer_id: int) -> Customer:
    customer = uow.customers.get_by_id(customer_id)
    if customer is None:
        raise ReferenceNotFound("Customer", customer_id)
    return customer


def require_subscription(uow: UnitOfWork, subscription_id: int) -> Subscription:
    subscription = uow.subscriptions.get_by_id(subscription_id)
    if subscription is None:
        raise ReferenceNotFound("Subscription", subscription_id)
    return subscription


def require_contract(uow: UnitOfWork, contract_id: int) -> Contract:
    contract = uow.contracts.get_for_invoice_creation(contract_id)
    if contract is None:
        raise ReferenceNotFound("Contract", contract_id)
    return contract


def require_invoice(uow: UnitOfWork, invoice_id: int) -> Invoice:
    invoice = uow.invoices.get_for_payment_creation(invoice_id)
    if invoice is None:
        raise ReferenceNotFound("Invoice", invoice_id)
    return invoice
