"""Credentials identity provider adapter.

Implements SignInPort for the auth component: checks an email/password
form against the user repository and issues a JWT on success.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from invoice_actions.components.auth.models import SignInResult
from invoice_actions.components.auth.ports import (
    PasswordHasherPort,
    TokenIssuerPort,
    UserRepoPort,
)
from invoice_actions.domain.errors import (
    ACCESS_DENIED,
    CREDENTIALS_SIGNIN,
    INVALID_PROVIDER,
    AuthError,
)
from invoice_actions.rules.models import AuthRules

logger = logging.getLogger(__name__)


class LoginForm(BaseModel):
    email: str
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def _looks_like_email(cls, v: str) -> str:
        v = v.strip().lower()
        local, _, domain = v.partition("@")
        if not local or "." not in domain:
            raise ValueError("invalid email")
        return v


class CredentialsProvider:
    """Email/password sign-in against the local users table."""

    strategy = "credentials"

    def __init__(
        self,
        user_repo: UserRepoPort,
        hasher: PasswordHasherPort,
        tokens: TokenIssuerPort,
        rules: AuthRules | None = None,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._tokens = tokens
        self._rules = rules or AuthRules()

    def _parse(self, form: Mapping[str, Any]) -> LoginForm:
        try:
            parsed = LoginForm.model_validate(
                {"email": form.get("email"), "password": form.get("password")}
            )
        except ValidationError as e:
            raise AuthError(CREDENTIALS_SIGNIN, "Malformed credentials") from e
        if len(parsed.password) < self._rules.min_password_length:
            raise AuthError(CREDENTIALS_SIGNIN, "Password too short")
        return parsed

    def sign_in(self, strategy: str, form: Mapping[str, Any]) -> SignInResult:
        if strategy != self.strategy:
            raise AuthError(INVALID_PROVIDER, f"Unsupported strategy: {strategy}")

        creds = self._parse(form)

        user = self._user_repo.get_by_email(creds.email)
        if not user or not self._hasher.verify_password(creds.password, user.password_hash):
            raise AuthError(CREDENTIALS_SIGNIN, "Invalid credentials")

        if user.status != "active":
            raise AuthError(ACCESS_DENIED, "User account is disabled")

        token = self._tokens.create_token(user.id, self._rules.token_ttl_minutes)
        logger.info("User %s signed in", user.id)
        return SignInResult(redirect_to=self._rules.redirect_to, token=token, user=user)
