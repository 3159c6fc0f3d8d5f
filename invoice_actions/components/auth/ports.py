from collections.abc import Mapping
from typing import Any, Protocol

from invoice_actions.domain.entities import User

from .models import SignInResult


class SignInPort(Protocol):
    """
    Port for the identity provider.

    Returns a SignInResult on success, raises AuthError for classified
    failures. Any other exception is an unclassified fault.
    """

    def sign_in(self, strategy: str, form: Mapping[str, Any]) -> SignInResult: ...


class UserRepoPort(Protocol):
    def get_by_email(self, email: str) -> User | None: ...


class PasswordHasherPort(Protocol):
    def verify_password(self, plain: str, hashed: str) -> bool: ...
    def hash_password(self, plain: str) -> str: ...


class TokenIssuerPort(Protocol):
    def create_token(self, user_id: object, ttl_minutes: int) -> str: ...
