"""
Invoices component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any
from uuid import UUID

from invoice_actions.domain.entities import InvoiceStatus

# --- Messages ---

CREATE_FAILED_MESSAGE = "Missing Fields. Failed to Create Invoice."
UPDATE_FAILED_MESSAGE = "Missing Fields. Failed to Update Invoice."
CREATE_STORAGE_MESSAGE = "Database Error: Failed to Create Invoice."
UPDATE_STORAGE_MESSAGE = "Database Error: Failed to Update Invoice."

CUSTOMER_MESSAGE = "Please select a customer."
AMOUNT_MESSAGE = "Please enter an amount greater than $0."
STATUS_MESSAGE = "Please select an invoice status."


# --- Validation Result ---


@dataclass(frozen=True)
class InvoiceFields:
    """Validated, narrowed form record."""

    customer_id: str
    amount: Decimal
    amount_in_cents: int
    status: InvoiceStatus


@dataclass(frozen=True)
class ValidationSuccess:
    data: InvoiceFields
    success: bool = True


@dataclass(frozen=True)
class ValidationFailure:
    errors: dict[str, list[str]] = field(default_factory=dict)
    success: bool = False


ValidationResult = ValidationSuccess | ValidationFailure


# --- Input Models ---


@dataclass(frozen=True)
class CreateInvoiceInput:
    """Raw form submission for a new invoice."""

    form: Mapping[str, Any]


@dataclass(frozen=True)
class UpdateInvoiceInput:
    """Raw form submission for an existing invoice."""

    invoice_id: UUID | str
    form: Mapping[str, Any]


@dataclass(frozen=True)
class DeleteInvoiceInput:
    invoice_id: UUID | str
