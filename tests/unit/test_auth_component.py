"""
Auth component unit tests.

Tests for translating provider errors into user-facing messages.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from invoice_actions.components.auth import (
    CREDENTIALS_STRATEGY,
    GENERIC_FAILURE_MESSAGE,
    INVALID_CREDENTIALS_MESSAGE,
    AuthenticateInput,
    SignInResult,
    run,
    run_authenticate,
)
from invoice_actions.domain.entities import User
from invoice_actions.domain.errors import AuthError
from invoice_actions.domain.outcomes import RedirectOutcome

# --- Mock Implementations ---


class MockProvider:
    """Identity provider that either succeeds or raises a configured error."""

    def __init__(self, error: BaseException | None = None) -> None:
        self.error = error
        self.calls: list[tuple[str, Mapping[str, Any]]] = []

    def sign_in(self, strategy: str, form: Mapping[str, Any]) -> SignInResult:
        self.calls.append((strategy, form))
        if self.error is not None:
            raise self.error
        user = User(name="User", email=str(form["email"]), password_hash="x")
        return SignInResult(redirect_to="/dashboard", token="tok", user=user)


FORM = {"email": "user@nextmail.com", "password": "123456"}


def test_success_redirects_without_message() -> None:
    provider = MockProvider()

    out = run_authenticate(AuthenticateInput(previous_state=None, form=FORM), provider)

    assert out.success is True
    assert out.message is None
    assert out.redirect == RedirectOutcome(path="/dashboard")
    assert out.token == "tok"


def test_forwards_form_under_credentials_strategy() -> None:
    provider = MockProvider()

    run_authenticate(AuthenticateInput(previous_state="Invalid credentials.", form=FORM), provider)

    assert provider.calls == [(CREDENTIALS_STRATEGY, FORM)]


def test_credentials_signin_maps_to_invalid_credentials() -> None:
    provider = MockProvider(AuthError("CredentialsSignin"))

    out = run_authenticate(AuthenticateInput(previous_state=None, form=FORM), provider)

    assert out.success is False
    assert out.message == INVALID_CREDENTIALS_MESSAGE
    assert out.redirect is None


@pytest.mark.parametrize("error_type", ["AccessDenied", "CallbackRouteError", "InvalidProvider"])
def test_other_auth_errors_map_to_generic_message(error_type: str) -> None:
    provider = MockProvider(AuthError(error_type))

    out = run_authenticate(AuthenticateInput(previous_state=None, form=FORM), provider)

    assert out.message == GENERIC_FAILURE_MESSAGE
    assert out.redirect is None


def test_unclassified_fault_is_reraised() -> None:
    provider = MockProvider(ConnectionError("provider down"))

    with pytest.raises(ConnectionError, match="provider down"):
        run_authenticate(AuthenticateInput(previous_state=None, form=FORM), provider)


def test_run_dispatch() -> None:
    out = run(AuthenticateInput(previous_state=None, form=FORM), provider=MockProvider())
    assert out.success is True

    with pytest.raises(ValueError, match="Unknown input type"):
        run(object(), provider=MockProvider())  # type: ignore[arg-type]
