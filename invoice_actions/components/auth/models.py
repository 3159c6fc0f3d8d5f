from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from invoice_actions.domain.entities import User
from invoice_actions.domain.outcomes import RedirectOutcome

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."
GENERIC_FAILURE_MESSAGE = "Something went wrong."


@dataclass
class AuthenticateInput:
    previous_state: str | None
    form: Mapping[str, Any]


@dataclass
class SignInResult:
    redirect_to: str
    token: str
    user: User


@dataclass
class AuthenticateOutput:
    message: str | None = None
    redirect: RedirectOutcome | None = None
    token: str | None = None
    success: bool = False
