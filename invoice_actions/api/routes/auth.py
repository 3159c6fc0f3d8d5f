from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, RedirectResponse, Response

from invoice_actions.adapters.auth.provider import CredentialsProvider
from invoice_actions.api.deps import get_form, get_rules, get_sign_in_provider
from invoice_actions.components.auth import AuthenticateInput, run_authenticate
from invoice_actions.rules.models import Rules

router = APIRouter()


@router.post("/login")
def login(
    form: dict[str, Any] = Depends(get_form),
    provider: CredentialsProvider = Depends(get_sign_in_provider),
    rules: Rules = Depends(get_rules),
) -> Response:
    """Credential sign-in form action."""
    result = run_authenticate(
        AuthenticateInput(previous_state=form.get("previousState"), form=form),
        provider,
        strategy=rules.auth.strategy,
    )

    if result.redirect is None:
        return JSONResponse(status_code=401, content={"message": result.message})

    cookie = rules.auth.cookie
    max_age = rules.auth.token_ttl_minutes * 60
    resp = RedirectResponse(url=result.redirect.path, status_code=303)
    resp.set_cookie(
        key=cookie.name,
        value=f"Bearer {result.token}",
        httponly=True,
        max_age=max_age,
        expires=max_age,
        samesite=cookie.same_site,  # type: ignore[arg-type]
        secure=cookie.secure,
    )
    return resp


@router.post("/logout")
def logout(rules: Rules = Depends(get_rules)) -> Response:
    """Clear the session cookie."""
    resp = JSONResponse(content={"status": "success"})
    resp.delete_cookie(key=rules.auth.cookie.name)
    return resp
