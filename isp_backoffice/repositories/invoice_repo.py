"""
Invoice repository.

Besides the plain CRUD inherited from SqlAlchemyRepository it owns the
guarded update that applies a payment to an invoice balance.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy import case, func, update

from isp_backoffice.models import Invoice, Payment, STATUS_PAID, STATUS_UNPAID
from isp_backoffice.repositories.base import SqlAlchemyRepository


class InvoiceRepository(SqlAlchemyRepository[Invoice]):
    def __init__(self, session):
        super().__init__(session, Invoice)

    def get_for_payment_creation(self, invoice_id: int) -> Optional[Invoice]:
        """Invoice a new payment is applied to."""
        return self.get_by_id(invoice_id)

    def list_payments(self, invoice_id: int) -> List[Payment]:
        """Payments recorded on an invoice, in payment order."""
        return (
            self.session.query(Payment)
            .filter(Payment.invoice_id == invoice_id)
            .order_by(Payment.payment_date.asc(), Payment.id.asc())
            .all()
        )

    def has_payments(self, invoice_id: int) -> bool:
        return (
            self.session.query(Payment.id)
            .filter(Payment.invoice_id == invoice_id)
            .first()
            is not None
        )

    def apply_payment(self, invoice_id: int, amount: Decimal) -> bool:
        """
        Adds ``amount`` to the invoice's paid total in one conditional UPDATE.

        The row is touched only while the invoice is UNPAID and the new total
        does not exceed the invoice amount; reaching the amount flips the
        status to PAID in the same statement. Returns False when the guard
        rejected the payment (already paid, overpay, or missing invoice).

        Totals are compared in whole cents so the guard stays exact on
        backends that evaluate NUMERIC arithmetic in floating point. ``amount``
        must carry at most two decimal places.

        ``status`` is assigned before ``paid_amount``: MySQL evaluates SET
        clauses left to right, so the CASE must still see the old total.
        """
        amount_cents = int(amount * 100)
        invoice_cents = func.round(Invoice.amount * 100)
        new_total_cents = func.round(Invoice.paid_amount * 100) + amount_cents
        stmt = (
            update(Invoice)
            .where(
                Invoice.id == invoice_id,
                Invoice.status == STATUS_UNPAID,
                new_total_cents <= invoice_cents,
            )
            .ordered_values(
                (
                    Invoice.status,
                    case((new_total_cents >= invoice_cents, STATUS_PAID), else_=STATUS_UNPAID),
                ),
                (Invoice.paid_amount, new_total_cents / 100),
            )
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        touched = result.rowcount == 1

        invoice = self.session.get(Invoice, invoice_id)
        if invoice is not None:
            # reload the columns changed behind the ORM's back
            self.session.refresh(invoice, ["status", "paid_amount"])
        return touched

    def update_if_unpaid(self, invoice_id: int, fields: Dict[str, Any]) -> bool:
        """
        Rewrites dates/amount of an invoice that has no payment yet.

        The "no payment" condition is part of the UPDATE itself, so a payment
        committed after the caller's checks makes this a no-op (False).
        """
        values = dict(fields)
        values["updated_at"] = datetime.utcnow()
        stmt = (
            update(Invoice)
            .where(Invoice.id == invoice_id, Invoice.paid_amount == 0)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)

        invoice = self.session.get(Invoice, invoice_id)
        if invoice is not None:
            self.session.refresh(invoice)
        return result.rowcount == 1
