"""
Services for invoices.

An invoice billing period must nest inside its contract period. Invoices are
created UNPAID with nothing paid; their dates and amount can be rewritten
only while no payment has been recorded.
"""
from __future__ import annotations

from typing import List

from isp_backoffice.errors import NotFound
from isp_backoffice.models import Invoice, Payment
from isp_backoffice.services import validation
from isp_backoffice.services.business_rules import (
    check_invoice_dates,
    check_invoice_editable,
    delete_restricted,
    raise_first,
)
from isp_backoffice.services.dto import CreateInvoiceRequest, UpdateInvoiceRequest
from isp_backoffice.services.logging import log_structured_event
from isp_backoffice.services.unit_of_work import UnitOfWork


def _get_or_404(uow: UnitOfWork, invoice_id: int) -> Invoice:
    invoice = uow.invoices.get_by_id(invoice_id)
    if invoice is None:
        raise NotFound("Invoice", invoice_id)
    return invoice


def list_invoices() -> List[Invoice]:
    with UnitOfWork() as uow:
        return uow.invoices.list_all()


def get_invoice(invoice_id: int) -> Invoice:
    with UnitOfWork() as uow:
        return _get_or_404(uow, invoice_id)


def create_invoice(request: CreateInvoiceRequest) -> Invoice:
    """
    Creates an UNPAID invoice.

    Order: contract reference, fetch contract, billing period against the
    contract period, insert.
    """
    with UnitOfWork() as uow:
        contract = validation.require_contract(uow, request.contract_id)

        raise_first(check_invoice_dates(request, contract))

        invoice = uow.invoices.create(request.to_fields())
        uow.commit()

    log_structured_event(
        "create_invoice",
        invoice_id=invoice.id,
        contract_id=invoice.contract_id,
        amount=invoice.amount,
    )
    return invoice


def update_invoice(invoice_id: int, request: UpdateInvoiceRequest) -> Invoice:
    with UnitOfWork() as uow:
        invoice = _get_or_404(uow, invoice_id)
        raise_first(check_invoice_editable(invoice))

        contract = uow.contracts.get_by_id(invoice.contract_id)
        if contract is None:
            raise NotFound("Contract", invoice.contract_id)
        raise_first(check_invoice_dates(request, contract))

        if not uow.invoices.update_if_unpaid(invoice_id, request.to_fields()):
            # a payment slipped in after the editable check
            uow.rollback()
            raise_first(check_invoice_editable(_get_or_404(uow, invoice_id)))
        uow.commit()

    log_structured_event("update_invoice", invoice_id=invoice_id, amount=request.amount)
    return invoice


def delete_invoice(invoice_id: int) -> None:
    with UnitOfWork() as uow:
        invoice = _get_or_404(uow, invoice_id)
        if uow.invoices.has_payments(invoice_id):
            raise delete_restricted("Invoice", invoice_id, "payments")
        uow.invoices.delete(invoice)
        uow.commit()

    log_structured_event("delete_invoice", invoice_id=invoice_id)


def list_invoice_payments(invoice_id: int) -> List[Payment]:
    with UnitOfWork() as uow:
        _get_or_404(uow, invoice_id)
        return uow.invoices.list_payments(invoice_id)
