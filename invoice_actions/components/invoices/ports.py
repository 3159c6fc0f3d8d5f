"""
Invoices component port definitions.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from invoice_actions.domain.entities import Invoice


class InvoiceRepoPort(Protocol):
    """Repository interface for invoices. Raises StorageError on failure."""

    def insert(self, invoice: Invoice) -> Invoice:
        """Insert a new invoice row."""
        ...

    def update(self, invoice_id: UUID | str, customer_id: str, amount: int, status: str) -> int:
        """Update customer, amount and status. Returns rows affected."""
        ...

    def delete(self, invoice_id: UUID | str) -> int:
        """Delete invoice by ID. Returns rows affected."""
        ...


class RevalidationPort(Protocol):
    """
    Port for cache revalidation.

    Implementations mark whatever is cached for a path as stale.
    """

    def revalidate_path(self, path: str) -> bool:
        """Invalidate cached content for ``path``."""
        ...


class ClockPort(Protocol):
    """Port for the current date - enables deterministic testing."""

    def today(self) -> date:
        ...
