"""
Services for payments.

A payment is accepted only when its date is not before the invoice issue
date, the invoice is still UNPAID and the new paid total does not exceed the
invoice amount. The last two conditions are enforced by the guarded balance
update in InvoiceRepository.apply_payment, inside the same transaction as
the payment insert, so concurrent payments on one invoice cannot overpay it.
"""
from __future__ import annotations

import logging
from typing import List

from isp_backoffice.errors import NotFound, ReferenceNotFound
from isp_backoffice.models import Payment
from isp_backoffice.services import validation
from isp_backoffice.services.business_rules import (
    check_payment_dates,
    raise_first,
    rejected_payment,
)
from isp_backoffice.services.dto import CreatePaymentRequest
from isp_backoffice.services.logging import log_structured_event
from isp_backoffice.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def list_payments() -> List[Payment]:
    with UnitOfWork() as uow:
        return uow.payments.list_all()


def get_payment(payment_id: int) -> Payment:
    with UnitOfWork() as uow:
        payment = uow.payments.get_by_id(payment_id)
        if payment is None:
            raise NotFound("Payment", payment_id)
        return payment


def create_payment(request: CreatePaymentRequest) -> Payment:
    """
    Records a payment and updates the invoice balance/status atomically.

    Raises ReferenceNotFound when the invoice does not exist and
    BusinessRuleViolation for a date before the issue date, a date in the
    past, an overpayment or an already paid invoice.
    """
    with UnitOfWork() as uow:
        invoice = validation.require_invoice(uow, request.invoice_id)

        raise_first(
            check_payment_dates(
                request.payment_date,
                invoice,
                now=validation.utcnow(),
                enforce_future_dates=validation.future_dates_enforced(),
            )
        )

        if not uow.invoices.apply_payment(request.invoice_id, request.amount):
            uow.rollback()
            current = uow.invoices.get_by_id(request.invoice_id)
            if current is None:
                raise ReferenceNotFound("Invoice", request.invoice_id)
            raise rejected_payment(current, request.invoice_id)

        payment = uow.payments.create(request.to_fields())
        uow.commit()

    log_structured_event(
        "create_payment",
        payment_id=payment.id,
        invoice_id=payment.invoice_id,
        amount=payment.amount,
        invoice_status=invoice.status,
    )
    return payment
