import logging

from invoice_actions.domain.errors import CREDENTIALS_SIGNIN, AuthError
from invoice_actions.domain.outcomes import RedirectOutcome

from .models import (
    GENERIC_FAILURE_MESSAGE,
    INVALID_CREDENTIALS_MESSAGE,
    AuthenticateInput,
    AuthenticateOutput,
)
from .ports import SignInPort

logger = logging.getLogger(__name__)

CREDENTIALS_STRATEGY = "credentials"


def run_authenticate(
    inp: AuthenticateInput, provider: SignInPort, strategy: str = CREDENTIALS_STRATEGY
) -> AuthenticateOutput:
    try:
        result = provider.sign_in(strategy, inp.form)
    except AuthError as err:
        logger.warning("Sign-in rejected: %s", err.type)
        if err.type == CREDENTIALS_SIGNIN:
            return AuthenticateOutput(message=INVALID_CREDENTIALS_MESSAGE)
        return AuthenticateOutput(message=GENERIC_FAILURE_MESSAGE)

    return AuthenticateOutput(
        redirect=RedirectOutcome(path=result.redirect_to),
        token=result.token,
        success=True,
    )


def run(inp: AuthenticateInput, *, provider: SignInPort | None = None) -> AuthenticateOutput:
    if isinstance(inp, AuthenticateInput):
        assert provider
        return run_authenticate(inp, provider)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
