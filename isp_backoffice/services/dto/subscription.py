"""Subscription request DTO."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict

from isp_backoffice.models import SUBSCRIPTION_TYPES
from isp_backoffice.services.dto.fields import FieldReader


@dataclass
class SubscriptionRequest:
    description: str
    subscription_type: str
    traffic: int
    price: Decimal
    extra_traffic_price: Decimal

    @classmethod
    def from_json(cls, data: Any) -> "SubscriptionRequest":
        reader = FieldReader(data)
        description = reader.text("description", 1, 255)
        subscription_type = reader.choice("type", SUBSCRIPTION_TYPES)
        traffic = reader.integer("traffic", minimum=0)
        price = reader.decimal("price")
        extra_traffic_price = reader.decimal("extra_traffic_price")
        reader.raise_if_errors()
        return cls(
            description=description,
            subscription_type=subscription_type,
            traffic=traffic,
            price=price,
            extra_traffic_price=extra_traffic_price,
        )

    def to_fields(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "subscription_type": self.subscription_type,
            "traffic": self.traffic,
            "price": self.price,
            "extra_traffic_price": self.extra_traffic_price,
        }
