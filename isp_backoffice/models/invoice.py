"""
Invoice model (table: invoices).

A billable amount for a sub-period of a contract. ``paid_amount`` is the
running total of the payments recorded against the invoice; it is only ever
changed by the guarded update in InvoiceRepository.apply_payment.
"""

from datetime import datetime

from isp_backoffice.extensions import db

STATUS_PAID = "PAID"
STATUS_UNPAID = "UNPAID"
INVOICE_STATUSES = (STATUS_PAID, STATUS_UNPAID)


class Invoice(db.Model):
    __tablename__ = "invoices"
    __table_args__ = (
        db.CheckConstraint("amount >= 0", name="ck_invoices_amount_non_negative"),
        db.CheckConstraint(
            "paid_amount >= 0 AND paid_amount <= amount",
            name="ck_invoices_paid_amount_range",
        ),
    )

    id = db.Column(db.Integer, primary_key=True)

    contract_id = db.Column(
        db.Integer,
        db.ForeignKey("contracts.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    issue_date = db.Column(db.DateTime, nullable=False, index=True)
    due_date = db.Column(db.DateTime, nullable=False, index=True)

    amount = db.Column(db.Numeric(15, 2), nullable=False)
    paid_amount = db.Column(db.Numeric(15, 2), nullable=False, default=0)

    status = db.Column(db.String(16), nullable=False, default=STATUS_UNPAID, index=True)

    # Timestamps
    created_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, index=True
    )
    updated_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    @property
    def is_paid(self) -> bool:
        return self.status == STATUS_PAID

    def __repr__(self) -> str:
        return (
            f"<Invoice id={self.id} contract_id={self.contract_id} "
            f"status={self.status!r}>"
        )
