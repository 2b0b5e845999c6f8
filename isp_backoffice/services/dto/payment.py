"""Payment request DTO."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict

from isp_backoffice.services.dto.fields import FieldReader


@dataclass
class CreatePaymentRequest:
    invoice_id: int
    payment_date: datetime
    amount: Decimal

    @classmethod
    def from_json(cls, data: Any) -> "CreatePaymentRequest":
        reader = FieldReader(data)
        invoice_id = reader.integer("invoice_id", minimum=1)
        payment_date = reader.timestamp("payment_date")
        amount = reader.decimal("amount")
        reader.raise_if_errors()
        return cls(invoice_id=invoice_id, payment_date=payment_date, amount=amount)

    def to_fields(self) -> Dict[str, Any]:
        return {
            "invoice_id": self.invoice_id,
            "payment_date": self.payment_date,
            "amount": self.amount,
        }
