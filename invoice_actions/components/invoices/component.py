"""
Invoices component - create, update and delete invoice rows.

Every mutation follows the same shape: validate the form, run one
parameterised statement, invalidate the cached invoice list, then hand a
redirect back to the caller.

Invariants:
- Validation failure short-circuits before any store call
- Stored amount is the input amount in minor units
- Successful create/update invalidates the list path once and redirects once
- Storage failure on create/update is logged and reported, never redirected
- Delete does not handle storage failure
"""

from __future__ import annotations

import logging
from uuid import uuid4

from invoice_actions.domain.entities import Invoice
from invoice_actions.domain.errors import StorageError
from invoice_actions.domain.outcomes import (
    FailureOutcome,
    Outcome,
    RedirectOutcome,
    RevalidatedOutcome,
    State,
)
from invoice_actions.rules.models import InvoiceRules

from .models import (
    CREATE_FAILED_MESSAGE,
    CREATE_STORAGE_MESSAGE,
    UPDATE_FAILED_MESSAGE,
    UPDATE_STORAGE_MESSAGE,
    CreateInvoiceInput,
    DeleteInvoiceInput,
    UpdateInvoiceInput,
    ValidationFailure,
)
from .ports import ClockPort, InvoiceRepoPort, RevalidationPort
from .validation import validate_invoice_form

logger = logging.getLogger(__name__)


def _revalidate_and_redirect(revalidator: RevalidationPort, path: str) -> RedirectOutcome:
    revalidator.revalidate_path(path)
    return RedirectOutcome(path=path)


# --- Component Entry Points ---


def run_create(
    inp: CreateInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    revalidator: RevalidationPort,
    clock: ClockPort,
    rules: InvoiceRules | None = None,
) -> Outcome:
    """
    Create a new invoice from a form submission.

    Args:
        inp: Raw form submission.
        repo: Invoice repository port.
        revalidator: Cache revalidation port.
        clock: Source of today's date.
        rules: Optional invoice rules (list path, minor unit factor).

    Returns:
        RedirectOutcome to the invoice list, or FailureOutcome with form State.
    """
    rules = rules or InvoiceRules()

    result = validate_invoice_form(inp.form, minor_unit_factor=rules.minor_unit_factor)
    if isinstance(result, ValidationFailure):
        return FailureOutcome(
            state=State(errors=result.errors, message=CREATE_FAILED_MESSAGE),
            kind="validation",
        )

    fields = result.data
    invoice = Invoice(
        id=uuid4(),
        customer_id=fields.customer_id,
        amount=fields.amount_in_cents,
        status=fields.status,
        date=clock.today(),
    )

    try:
        repo.insert(invoice)
    except StorageError:
        logger.exception("Failed to create invoice for customer %s", fields.customer_id)
        return FailureOutcome(state=State(message=CREATE_STORAGE_MESSAGE), kind="storage")

    logger.info("Created invoice %s (%d minor units)", invoice.id, invoice.amount)
    return _revalidate_and_redirect(revalidator, rules.list_path)


def run_update(
    inp: UpdateInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    revalidator: RevalidationPort,
    rules: InvoiceRules | None = None,
) -> Outcome:
    """
    Update customer, amount and status of an existing invoice.

    The id comes from the route, never from the form. An id matching no
    row is not an error.
    """
    rules = rules or InvoiceRules()

    result = validate_invoice_form(inp.form, minor_unit_factor=rules.minor_unit_factor)
    if isinstance(result, ValidationFailure):
        return FailureOutcome(
            state=State(errors=result.errors, message=UPDATE_FAILED_MESSAGE),
            kind="validation",
        )

    fields = result.data
    try:
        rows = repo.update(
            inp.invoice_id,
            customer_id=fields.customer_id,
            amount=fields.amount_in_cents,
            status=fields.status,
        )
    except StorageError:
        logger.exception("Failed to update invoice %s", inp.invoice_id)
        return FailureOutcome(state=State(message=UPDATE_STORAGE_MESSAGE), kind="storage")

    logger.info("Updated invoice %s (%d row(s))", inp.invoice_id, rows)
    return _revalidate_and_redirect(revalidator, rules.list_path)


def run_delete(
    inp: DeleteInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    revalidator: RevalidationPort,
    rules: InvoiceRules | None = None,
) -> RevalidatedOutcome:
    """Delete an invoice. StorageError propagates to the caller."""
    rules = rules or InvoiceRules()

    rows = repo.delete(inp.invoice_id)
    logger.info("Deleted invoice %s (%d row(s))", inp.invoice_id, rows)

    revalidator.revalidate_path(rules.list_path)
    return RevalidatedOutcome(path=rules.list_path)


def run(
    inp: CreateInvoiceInput | UpdateInvoiceInput | DeleteInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    revalidator: RevalidationPort,
    clock: ClockPort | None = None,
    rules: InvoiceRules | None = None,
) -> Outcome:
    if isinstance(inp, CreateInvoiceInput):
        assert clock
        return run_create(inp, repo=repo, revalidator=revalidator, clock=clock, rules=rules)

    elif isinstance(inp, UpdateInvoiceInput):
        return run_update(inp, repo=repo, revalidator=revalidator, rules=rules)

    elif isinstance(inp, DeleteInvoiceInput):
        return run_delete(inp, repo=repo, revalidator=revalidator, rules=rules)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
