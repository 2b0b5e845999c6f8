"""Request DTOs: JSON bodies parsed and field-validated."""

from .fields import FieldReader, format_timestamp, parse_timestamp
from .customer import CustomerRequest
from .subscription import SubscriptionRequest
from .contract import CreateContractRequest, UpdateContractRequest
from .invoice import CreateInvoiceRequest, UpdateInvoiceRequest
from .payment import CreatePaymentRequest

__all__ = [
    "FieldReader",
    "format_timestamp",
    "parse_timestamp",
    "CustomerRequest",
    "SubscriptionRequest",
    "CreateContractRequest",
    "UpdateContractRequest",
    "CreateInvoiceRequest",
    "UpdateInvoiceRequest",
    "CreatePaymentRequest",
]
