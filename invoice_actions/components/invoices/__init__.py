"""
Invoices component - form actions that mutate invoice rows.

Handles validation, persistence, list cache invalidation and redirect.
"""

from .component import (
    run,
    run_create,
    run_delete,
    run_update,
)
from .models import (
    AMOUNT_MESSAGE,
    CREATE_FAILED_MESSAGE,
    CREATE_STORAGE_MESSAGE,
    CUSTOMER_MESSAGE,
    STATUS_MESSAGE,
    UPDATE_FAILED_MESSAGE,
    UPDATE_STORAGE_MESSAGE,
    CreateInvoiceInput,
    DeleteInvoiceInput,
    InvoiceFields,
    UpdateInvoiceInput,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)
from .ports import ClockPort, InvoiceRepoPort, RevalidationPort
from .validation import InvoiceForm, to_minor_units, validate_invoice_form

__all__ = [
    # Entry points
    "run",
    "run_create",
    "run_delete",
    "run_update",
    # Validation
    "InvoiceForm",
    "to_minor_units",
    "validate_invoice_form",
    # Models
    "CreateInvoiceInput",
    "DeleteInvoiceInput",
    "InvoiceFields",
    "UpdateInvoiceInput",
    "ValidationFailure",
    "ValidationResult",
    "ValidationSuccess",
    # Messages
    "AMOUNT_MESSAGE",
    "CREATE_FAILED_MESSAGE",
    "CREATE_STORAGE_MESSAGE",
    "CUSTOMER_MESSAGE",
    "STATUS_MESSAGE",
    "UPDATE_FAILED_MESSAGE",
    "UPDATE_STORAGE_MESSAGE",
    # Ports
    "ClockPort",
    "InvoiceRepoPort",
    "RevalidationPort",
]
