"""
Services for customers.
Plain CRUD plus the customer-scoped reads (contracts, unpaid invoices).
"""
from __future__ import annotations

from typing import List

from isp_backoffice.errors import NotFound
from isp_backoffice.models import Contract, Customer, Invoice
from isp_backoffice.services.business_rules import delete_restricted
from isp_backoffice.services.dto import CustomerRequest
from isp_backoffice.services.logging import log_structured_event
from isp_backoffice.services.unit_of_work import UnitOfWork


def _get_or_404(uow: UnitOfWork, customer_id: int) -> Customer:
    customer = uow.customers.get_by_id(customer_id)
    if customer is None:
        raise NotFound("Customer", customer_id)
    return customer


def list_customers() -> List[Customer]:
    with UnitOfWork() as uow:
        return uow.customers.list_all()


def get_customer(customer_id: int) -> Customer:
    with UnitOfWork() as uow:
        return _get_or_404(uow, customer_id)


def create_customer(request: CustomerRequest) -> Customer:
    with UnitOfWork() as uow:
        customer = uow.customers.create(request.to_fields())
        uow.commit()

    log_structured_event("create_customer", customer_id=customer.id)
    return customer


def update_customer(customer_id: int, request: CustomerRequest) -> Customer:
    with UnitOfWork() as uow:
        customer = _get_or_404(uow, customer_id)
        uow.customers.update(customer, request.to_fields())
        uow.commit()

    log_structured_event("update_customer", customer_id=customer_id)
    return customer


def delete_customer(customer_id: int) -> None:
    with UnitOfWork() as uow:
        customer = _get_or_404(uow, customer_id)
        if uow.customers.has_contracts(customer_id):
            raise delete_restricted("Customer", customer_id, "contracts")
        uow.customers.delete(customer)
        uow.commit()

    log_structured_event("delete_customer", customer_id=customer_id)


def list_customer_contracts(customer_id: int) -> List[Contract]:
    """Contracts of a customer; 404 when the customer does not exist."""
    with UnitOfWork() as uow:
        _get_or_404(uow, customer_id)
        return uow.customers.list_contracts(customer_id)


def list_customer_unpaid_invoices(customer_id: int) -> List[Invoice]:
    """Unpaid invoices of a customer, joined across all of its contracts."""
    with UnitOfWork() as uow:
        _get_or_404(uow, customer_id)
        return uow.customers.list_unpaid_invoices(customer_id)
