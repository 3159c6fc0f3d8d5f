"""
Auth component - credential sign-in.

Forwards the raw form to the identity provider and translates its
classified errors into user-facing messages.
"""

from .component import CREDENTIALS_STRATEGY, run, run_authenticate
from .models import (
    GENERIC_FAILURE_MESSAGE,
    INVALID_CREDENTIALS_MESSAGE,
    AuthenticateInput,
    AuthenticateOutput,
    SignInResult,
)
from .ports import PasswordHasherPort, SignInPort, TokenIssuerPort, UserRepoPort

__all__ = [
    # Entry points
    "run",
    "run_authenticate",
    "CREDENTIALS_STRATEGY",
    # Models
    "AuthenticateInput",
    "AuthenticateOutput",
    "SignInResult",
    "GENERIC_FAILURE_MESSAGE",
    "INVALID_CREDENTIALS_MESSAGE",
    # Ports
    "PasswordHasherPort",
    "SignInPort",
    "TokenIssuerPort",
    "UserRepoPort",
]
