"""
Invoice form action routes.

Thin HTTP adapters over the invoices component: outcomes map to a 303
redirect, a 422 with the form State, or a 500 when the store failed.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, RedirectResponse, Response
from pydantic import BaseModel

from invoice_actions.adapters.cache import InMemoryPathCache
from invoice_actions.adapters.clock import SystemClock
from invoice_actions.adapters.sqlite.repos import SQLiteInvoiceRepo
from invoice_actions.api.deps import (
    get_clock,
    get_form,
    get_invoice_repo,
    get_path_cache,
    get_rules,
)
from invoice_actions.components.invoices import (
    CreateInvoiceInput,
    DeleteInvoiceInput,
    UpdateInvoiceInput,
    run_create,
    run_delete,
    run_update,
)
from invoice_actions.domain.entities import Invoice
from invoice_actions.domain.outcomes import FailureOutcome, Outcome, RedirectOutcome
from invoice_actions.rules.models import Rules

router = APIRouter()


class InvoiceResponse(BaseModel):
    id: str
    customer_id: str
    amount: int
    status: str
    date: str


class RevalidatedResponse(BaseModel):
    revalidated: str


# --- Helper Functions ---


def _invoice_to_response(invoice: Invoice) -> InvoiceResponse:
    return InvoiceResponse(
        id=str(invoice.id),
        customer_id=invoice.customer_id,
        amount=invoice.amount,
        status=invoice.status,
        date=invoice.date.isoformat(),
    )


def _outcome_to_response(outcome: Outcome) -> Response:
    if isinstance(outcome, RedirectOutcome):
        return RedirectResponse(url=outcome.path, status_code=303)
    if isinstance(outcome, FailureOutcome):
        status_code = 422 if outcome.kind == "validation" else 500
        return JSONResponse(status_code=status_code, content=outcome.state.to_dict())
    return JSONResponse(content={"revalidated": outcome.path})


# --- Routes ---


@router.get("/dashboard/invoices", response_model=list[InvoiceResponse])
def list_invoices(
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: InMemoryPathCache = Depends(get_path_cache),
    rules: Rules = Depends(get_rules),
) -> Any:
    """Invoice list view, served from the path cache until revalidated."""
    return cache.get_or_compute(
        rules.invoices.list_path,
        lambda: [_invoice_to_response(inv) for inv in repo.list_all()],
    )


@router.post("/dashboard/invoices/create")
def create_invoice(
    form: dict[str, Any] = Depends(get_form),
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: InMemoryPathCache = Depends(get_path_cache),
    clock: SystemClock = Depends(get_clock),
    rules: Rules = Depends(get_rules),
) -> Response:
    outcome = run_create(
        CreateInvoiceInput(form=form),
        repo=repo,
        revalidator=cache,
        clock=clock,
        rules=rules.invoices,
    )
    return _outcome_to_response(outcome)


@router.post("/dashboard/invoices/{invoice_id}/edit")
def update_invoice(
    invoice_id: str,
    form: dict[str, Any] = Depends(get_form),
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: InMemoryPathCache = Depends(get_path_cache),
    rules: Rules = Depends(get_rules),
) -> Response:
    outcome = run_update(
        UpdateInvoiceInput(invoice_id=invoice_id, form=form),
        repo=repo,
        revalidator=cache,
        rules=rules.invoices,
    )
    return _outcome_to_response(outcome)


@router.post("/dashboard/invoices/{invoice_id}/delete", response_model=RevalidatedResponse)
def delete_invoice(
    invoice_id: str,
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: InMemoryPathCache = Depends(get_path_cache),
    rules: Rules = Depends(get_rules),
) -> Response:
    outcome = run_delete(
        DeleteInvoiceInput(invoice_id=invoice_id),
        repo=repo,
        revalidator=cache,
        rules=rules.invoices,
    )
    return _outcome_to_response(outcome)
