"""
JSON representation of the models.

Amounts are emitted as JSON numbers, timestamps as ISO-8601 UTC strings.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from isp_backoffice.models import Contract, Customer, Invoice, Payment, Subscription
from isp_backoffice.services.dto import format_timestamp


def _number(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


def customer_to_dict(customer: Customer) -> Dict[str, Any]:
    return {
        "id": customer.id,
        "name": customer.name,
        "fullname": customer.fullname,
        "address": customer.address,
        "phone": customer.phone,
        "cnp": customer.cnp,
    }


def subscription_to_dict(subscription: Subscription) -> Dict[str, Any]:
    return {
        "id": subscription.id,
        "description": subscription.description,
        "type": subscription.subscription_type,
        "traffic": subscription.traffic,
        "price": _number(subscription.price),
        "extra_traffic_price": _number(subscription.extra_traffic_price),
    }


def contract_to_dict(contract: Contract) -> Dict[str, Any]:
    return {
        "id": contract.id,
        "customer_id": contract.customer_id,
        "subscription_id": contract.subscription_id,
        "start_date": format_timestamp(contract.start_date),
        "end_date": format_timestamp(contract.end_date),
    }


def invoice_to_dict(invoice: Invoice) -> Dict[str, Any]:
    return {
        "id": invoice.id,
        "contract_id": invoice.contract_id,
        "issue_date": format_timestamp(invoice.issue_date),
        "due_date": format_timestamp(invoice.due_date),
        "amount": _number(invoice.amount),
        "paid_amount": _number(invoice.paid_amount),
        "status": invoice.status,
    }


def payment_to_dict(payment: Payment) -> Dict[str, Any]:
    return {
        "id": payment.id,
        "invoice_id": payment.invoice_id,
        "payment_date": format_timestamp(payment.payment_date),
        "amount": _number(payment.amount),
    }


def many(serializer, rows: Iterable[Any]) -> List[Dict[str, Any]]:
    return [serializer(row) for row in rows]
