"""
Outcome variants returned by the form actions.

Navigation is a value, not a non-local exit: the HTTP layer turns a
RedirectOutcome into a 303 response, tests simply compare it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

FailureKind = Literal["validation", "storage"]


@dataclass(frozen=True)
class State:
    """Form state handed back to the caller for re-rendering."""

    errors: dict[str, list[str]] = field(default_factory=dict)
    message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"errors": {k: list(v) for k, v in self.errors.items()}, "message": self.message}


@dataclass(frozen=True)
class RedirectOutcome:
    """Navigate the client to ``path``."""

    path: str
    success: bool = True


@dataclass(frozen=True)
class RevalidatedOutcome:
    """Cached view at ``path`` was invalidated; no navigation."""

    path: str
    success: bool = True


@dataclass(frozen=True)
class FailureOutcome:
    """Mutation did not happen (validation) or did not land (storage)."""

    state: State
    kind: FailureKind = "validation"
    success: bool = False


Outcome = RedirectOutcome | RevalidatedOutcome | FailureOutcome
