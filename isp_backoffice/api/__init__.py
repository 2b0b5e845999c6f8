"""
JSON API package.

Contains:
- api_customers_bp     -> /api/customer
- api_subscriptions_bp -> /api/subscription
- api_contracts_bp     -> /api/contract
- api_invoices_bp      -> /api/invoice
- api_payments_bp      -> /api/payment
"""

from .api_customers import api_customers_bp
from .api_subscriptions import api_subscriptions_bp
from .api_contracts import api_contracts_bp
from .api_invoices import api_invoices_bp
from .api_payments import api_payments_bp
from .errors import register_error_handlers

__all__ = [
    "api_customers_bp",
    "api_subscriptions_bp",
    "api_contracts_bp",
    "api_invoices_bp",
    "api_payments_bp",
    "register_error_handlers",
]
