"""Contract request DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from isp_backoffice.services.dto.fields import FieldReader


@dataclass
class CreateContractRequest:
    customer_id: int
    subscription_id: int
    start_date: datetime
    end_date: datetime

    @classmethod
    def from_json(cls, data: Any) -> "CreateContractRequest":
        reader = FieldReader(data)
        customer_id = reader.integer("customer_id", minimum=1)
        subscription_id = reader.integer("subscription_id", minimum=1)
        start_date = reader.timestamp("start_date")
        end_date = reader.timestamp("end_date")
        reader.raise_if_errors()
        return cls(
            customer_id=customer_id,
            subscription_id=subscription_id,
            start_date=start_date,
            end_date=end_date,
        )

    def to_fields(self) -> Dict[str, Any]:
        return {
            "customer_id": self.customer_id,
            "subscription_id": self.subscription_id,
            "start_date": self.start_date,
            "end_date": self.end_date,
        }


@dataclass
class UpdateContractRequest:
    start_date: datetime
    end_date: datetime

    @classmethod
    def from_json(cls, data: Any) -> "UpdateContractRequest":
        reader = FieldReader(data)
        start_date = reader.timestamp("start_date")
        end_date = reader.timestamp("end_date")
        reader.raise_if_errors()
        return cls(start_date=start_date, end_date=end_date)

    def to_fields(self) -> Dict[str, Any]:
        return {"start_date": self.start_date, "end_date": self.end_date}
