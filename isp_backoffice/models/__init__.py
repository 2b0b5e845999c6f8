"""
Package of the SQLAlchemy models.
"""

from .customer import Customer
from .subscription import Subscription, SUBSCRIPTION_TYPES
from .contract import Contract
from .invoice import Invoice, INVOICE_STATUSES, STATUS_PAID, STATUS_UNPAID
from .payment import Payment

__all__ = [
    "Customer",
    "Subscription",
    "SUBSCRIPTION_TYPES",
    "Contract",
    "Invoice",
    "INVOICE_STATUSES",
    "STATUS_PAID",
    "STATUS_UNPAID",
    "Payment",
]
