"""
Repositories package: data access for every entity.
"""

from .customer_repo import CustomerRepository
from .subscription_repo import SubscriptionRepository
from .contract_repo import ContractRepository
from .invoice_repo import InvoiceRepository
from .payment_repo import PaymentRepository

__all__ = [
    "CustomerRepository",
    "SubscriptionRepository",
    "ContractRepository",
    "InvoiceRepository",
    "PaymentRepository",
]
