"""Invoice request DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict

from isp_backoffice.services.dto.fields import FieldReader


@dataclass
class CreateInvoiceRequest:
    contract_id: int
    issue_date: datetime
    due_date: datetime
    amount: Decimal

    @classmethod
    def from_json(cls, data: Any) -> "CreateInvoiceRequest":
        reader = FieldReader(data)
        contract_id = reader.integer("contract_id", minimum=1)
        issue_date = reader.timestamp("issue_date")
        due_date = reader.timestamp("due_date")
        amount = reader.decimal("amount")
        reader.raise_if_errors()
        return cls(
            contract_id=contract_id,
            issue_date=issue_date,
            due_date=due_date,
            amount=amount,
        )

    def to_fields(self) -> Dict[str, Any]:
        return {
            "contract_id": self.contract_id,
            "issue_date": self.issue_date,
            "due_date": self.due_date,
            "amount": self.amount,
        }


@dataclass
class UpdateInvoiceRequest:
    issue_date: datetime
    due_date: datetime
    amount: Decimal

    @classmethod
    def from_json(cls, data: Any) -> "UpdateInvoiceRequest":
        reader = FieldReader(data)
        issue_date = reader.timestamp("issue_date")
        due_date = reader.timestamp("due_date")
        amount = reader.decimal("amount")
        reader.raise_if_errors()
        return cls(issue_date=issue_date, due_date=due_date, amount=amount)

    def to_fields(self) -> Dict[str, Any]:
        return {
            "issue_date": self.issue_date,
            "due_date": self.due_date,
            "amount": self.amount,
        }
