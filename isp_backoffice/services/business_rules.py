"""
Temporal and monetary rules spanning several entities.

Every check is a pure function: it receives the candidate request, the
parent entity already fetched by the caller and the current time, and
returns the violated rules in evaluation order (empty list when the request
is acceptable). The services raise the first one.

All datetimes are naive UTC.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Protocol, Sequence

from isp_backoffice.errors import BusinessRuleViolation
from isp_backoffice.services.dto.fields import format_timestamp

CONTRACT_DATE_ORDER = "contract_date_order"
CONTRACT_DATES_NOT_IN_PAST = "contract_dates_not_in_past"
CONTRACT_COVERS_INVOICES = "contract_covers_invoices"
INVOICE_DATE_ORDER = "invoice_date_order"
INVOICE_WITHIN_CONTRACT = "invoice_within_contract"
INVOICE_HAS_PAYMENTS = "invoice_has_payments"
PAYMENT_NOT_BEFORE_ISSUE = "payment_not_before_issue"
PAYMENT_DATE_NOT_IN_PAST = "payment_date_not_in_past"
PAYMENT_OVERPAY = "payment_overpay"
INVOICE_ALREADY_PAID = "invoice_already_paid"
DELETE_RESTRICTED = "delete_restricted"


class ContractPeriod(Protocol):
    start_date: datetime
    end_date: datetime


class InvoicePeriod(Protocol):
    issue_date: datetime
    due_date: datetime


def check_contract_dates(
    start_date: datetime,
    end_date: datetime,
    now: datetime,
    enforce_future_dates: bool = True,
) -> List[BusinessRuleViolation]:
    """Rules for a contract being created or re-dated."""
    violations: List[BusinessRuleViolation] = []

    if start_date > end_date:
        violations.append(
            BusinessRuleViolation(
                CONTRACT_DATE_ORDER,
                "Start date should be earlier than end date",
                {"start_date": format_timestamp(start_date), "end_date": format_timestamp(end_date)},
            )
        )

    if enforce_future_dates and (start_date < now or end_date < now):
        field_name = "start_date" if start_date < now else "end_date"
        label = "Start date" if field_name == "start_date" else "End date"
        violations.append(
            BusinessRuleViolation(
                CONTRACT_DATES_NOT_IN_PAST,
                f"{label} should be later than or equal to today",
                {field_name: format_timestamp(start_date if field_name == "start_date" else end_date)},
            )
        )

    return violations


def check_invoice_dates(
    invoice: InvoicePeriod,
    contract: ContractPeriod,
) -> List[BusinessRuleViolation]:
    """Rules for an invoice billing period against its contract."""
    violations: List[BusinessRuleViolation] = []

    if invoice.issue_date > invoice.due_date:
        violations.append(
            BusinessRuleViolation(
                INVOICE_DATE_ORDER,
                "Issue date should be earlier than due date",
                {
                    "issue_date": format_timestamp(invoice.issue_date),
                    "due_date": format_timestamp(invoice.due_date),
                },
            )
        )

    if invoice.issue_date < contract.start_date or invoice.due_date > contract.end_date:
        violations.append(
            BusinessRuleViolation(
                INVOICE_WITHIN_CONTRACT,
                "Invoice period must fall within the contract period",
                {
                    "issue_date": format_timestamp(invoice.issue_date),
                    "due_date": format_timestamp(invoice.due_date),
                    "contract_start_date": format_timestamp(contract.start_date),
                    "contract_end_date": format_timestamp(contract.end_date),
                },
            )
        )

    return violations


def check_contract_covers_invoices(
    start_date: datetime,
    end_date: datetime,
    invoices: Sequence[InvoicePeriod],
) -> List[BusinessRuleViolation]:
    """A re-dated contract must still contain the periods of its invoices."""
    outside = [
        inv for inv in invoices
        if inv.issue_date < start_date or inv.due_date > end_date
    ]
    if not outside:
        return []
    return [
        BusinessRuleViolation(
            CONTRACT_COVERS_INVOICES,
            "Contract period must contain the periods of its invoices",
            {"invoice_ids": [getattr(inv, "id", None) for inv in outside]},
        )
    ]


def check_invoice_editable(invoice) -> List[BusinessRuleViolation]:
    """An invoice can be changed only before any payment is recorded."""
    if invoice.paid_amount and invoice.paid_amount > 0:
        return [
            BusinessRuleViolation(
                INVOICE_HAS_PAYMENTS,
                "An invoice with recorded payments cannot be modified",
                {"invoice_id": invoice.id},
            )
        ]
    return []


def check_payment_dates(
    payment_date: datetime,
    invoice: InvoicePeriod,
    now: datetime,
    enforce_future_dates: bool = True,
) -> List[BusinessRuleViolation]:
    """Rules on the date of a new payment."""
    violations: List[BusinessRuleViolation] = []

    if payment_date < invoice.issue_date:
        violations.append(
            BusinessRuleViolation(
                PAYMENT_NOT_BEFORE_ISSUE,
                "Payment date should not be earlier than the invoice issue date",
                {
                    "payment_date": format_timestamp(payment_date),
                    "issue_date": format_timestamp(invoice.issue_date),
                },
            )
        )

    if enforce_future_dates and payment_date < now:
        violations.append(
            BusinessRuleViolation(
                PAYMENT_DATE_NOT_IN_PAST,
                "Payment date should be later than or equal to today",
                {"payment_date": format_timestamp(payment_date)},
            )
        )

    return violations


def rejected_payment(invoice, invoice_id: int) -> BusinessRuleViolation:
    """
    Explains why the guarded balance update refused a payment.

    ``invoice`` is the row re-read after the refusal (None if it vanished in
    the meantime, which the caller reports as not found instead).
    """
    if invoice.is_paid:
        return BusinessRuleViolation(
            INVOICE_ALREADY_PAID,
            "The invoice is already paid!",
            {"invoice_id": invoice_id},
        )
    return BusinessRuleViolation(
        PAYMENT_OVERPAY,
        "You cannot pay more than the total amount of the invoice!",
        {
            "invoice_id": invoice_id,
            "amount": str(invoice.amount),
            "paid_amount": str(invoice.paid_amount),
        },
    )


def delete_restricted(entity: str, entity_id: int, dependents: str) -> BusinessRuleViolation:
    return BusinessRuleViolation(
        DELETE_RESTRICTED,
        f"{entity} {entity_id} cannot be deleted while it has {dependents}",
        {"entity": entity, "id": entity_id, "dependents": dependents},
    )


def raise_first(violations: List[BusinessRuleViolation]) -> None:
    """Raises the first violated rule, if any."""
    if violations:
        raise violations[0]
