"""
Invoice form validation.

The form schema is declared once as a pydantic model; validate_invoice_form
is the explicit entry point that narrows an untyped submission into
InvoiceFields or a field-keyed error map.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from invoice_actions.domain.entities import InvoiceStatus

from .models import (
    AMOUNT_MESSAGE,
    CUSTOMER_MESSAGE,
    STATUS_MESSAGE,
    InvoiceFields,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)

# Largest amount the store can hold (SQLite INTEGER is signed 64-bit).
MAX_MINOR_UNITS = 2**63 - 1

# Form field name -> user-facing message, in display order.
FIELD_MESSAGES: dict[str, str] = {
    "customerId": CUSTOMER_MESSAGE,
    "amount": AMOUNT_MESSAGE,
    "status": STATUS_MESSAGE,
}


class InvoiceForm(BaseModel):
    """Shape of the create/update invoice form."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    customer_id: str = Field(alias="customerId", min_length=1)
    amount: Decimal = Field(gt=0)
    status: InvoiceStatus

    @field_validator("customer_id", mode="before")
    @classmethod
    def _coerce_customer_id(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        return str(v)


def to_minor_units(amount: Decimal, factor: int = 100) -> int:
    """Convert a major-unit amount to integer minor units, rounding half up."""
    return int((amount * factor).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _field_errors(exc: ValidationError) -> dict[str, list[str]]:
    failed: set[str] = set()
    for err in exc.errors():
        loc = err.get("loc") or ()
        if not loc:
            continue
        name = str(loc[0])
        if name == "customer_id":
            name = "customerId"
        failed.add(name)
    return {name: [msg] for name, msg in FIELD_MESSAGES.items() if name in failed}


def validate_invoice_form(
    form: Mapping[str, Any], *, minor_unit_factor: int = 100
) -> ValidationResult:
    """
    Validate the customerId / amount / status fields of a submission.

    Any other keys (id, date, ...) are ignored.
    """
    raw = {name: form.get(name) for name in FIELD_MESSAGES}
    try:
        parsed = InvoiceForm.model_validate(raw)
    except ValidationError as e:
        return ValidationFailure(errors=_field_errors(e))

    try:
        cents = to_minor_units(parsed.amount, minor_unit_factor)
    except InvalidOperation:
        # Too many digits for the decimal context
        return ValidationFailure(errors={"amount": [AMOUNT_MESSAGE]})
    if not 0 < cents <= MAX_MINOR_UNITS:
        # Rounds to nothing, or too large to store
        return ValidationFailure(errors={"amount": [AMOUNT_MESSAGE]})

    return ValidationSuccess(
        data=InvoiceFields(
            customer_id=parsed.customer_id,
            amount=parsed.amount,
            amount_in_cents=cents,
            status=parsed.status,
        )
    )
