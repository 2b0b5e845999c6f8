"""
Payment model (table: payments).

A sum applied to the outstanding balance of an invoice. Payments are
append-only: no update, no delete.
"""

from datetime import datetime

from isp_backoffice.extensions import db


class Payment(db.Model):
    __tablename__ = "payments"
    __table_args__ = (
        db.CheckConstraint("amount >= 0", name="ck_payments_amount_non_negative"),
    )

    id = db.Column(db.Integer, primary_key=True)

    invoice_id = db.Column(
        db.Integer,
        db.ForeignKey("invoices.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    payment_date = db.Column(db.DateTime, nullable=False, index=True)
    amount = db.Column(db.Numeric(15, 2), nullable=False)

    created_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, index=True
    )

    def __repr__(self) -> str:
        return (
            f"<Payment id={self.id} invoice_id={self.invoice_id} "
            f"amount={self.amount}>"
        )
