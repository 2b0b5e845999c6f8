"""
Services package (business logic of the application).

Services orchestrate:
- repositories (database access) through the Unit of Work
- referential checks and business rules
- transactions
- structured logging
"""

from . import (
    contract_service,
    customer_service,
    invoice_service,
    payment_service,
    subscription_service,
)

__all__ = [
    "contract_service",
    "customer_service",
    "invoice_service",
    "payment_service",
    "subscription_service",
]
