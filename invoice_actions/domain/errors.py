"""
Error types shared between components and adapters.

StorageError is the only thing repositories raise; AuthError is the
provider-classified sign-in failure. Anything else is an unclassified
fault and propagates untouched.
"""

from __future__ import annotations


class StorageError(Exception):
    """A statement against the relational store failed."""

    def __init__(self, operation: str, cause: BaseException | None = None) -> None:
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{operation} failed{detail}")


class AuthError(Exception):
    """Sign-in failure tagged with a discriminant ``type``."""

    def __init__(self, type: str, message: str | None = None) -> None:  # noqa: A002
        self.type = type
        super().__init__(message or type)


CREDENTIALS_SIGNIN = "CredentialsSignin"
ACCESS_DENIED = "AccessDenied"
INVALID_PROVIDER = "InvalidProvider"
