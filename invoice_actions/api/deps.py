import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from fastapi import Depends, Request

from invoice_actions.adapters.auth.crypto import JWTAuthAdapter
from invoice_actions.adapters.auth.provider import CredentialsProvider
from invoice_actions.adapters.cache import InMemoryPathCache
from invoice_actions.adapters.clock import SystemClock
from invoice_actions.adapters.sqlite.database import Database
from invoice_actions.adapters.sqlite.repos import SQLiteInvoiceRepo, SQLiteUserRepo
from invoice_actions.rules.loader import load_rules
from invoice_actions.rules.models import Rules

DEFAULT_SECRET_KEY = "dev-secret-unsafe"


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.db_path = os.environ.get("INVOICES_DB_PATH", "./data/invoices.db")
        self.rules_path = Path(
            os.environ.get("INVOICES_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )
        self.secret_key = os.environ.get("INVOICES_SECRET_KEY", DEFAULT_SECRET_KEY)


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)


# --- Process-scoped resources (opened in the app lifespan) ---
def get_database(request: Request) -> Database:
    db: Database = request.app.state.db
    return db


def get_path_cache(request: Request) -> InMemoryPathCache:
    cache: InMemoryPathCache = request.app.state.path_cache
    return cache


def get_clock() -> SystemClock:
    return SystemClock()


# --- Repos ---
def get_invoice_repo(db: Database = Depends(get_database)) -> SQLiteInvoiceRepo:
    return SQLiteInvoiceRepo(db)


def get_user_repo(db: Database = Depends(get_database)) -> SQLiteUserRepo:
    return SQLiteUserRepo(db)


# --- Auth ---
def get_auth_adapter(settings: Settings = Depends(get_settings)) -> JWTAuthAdapter:
    return JWTAuthAdapter(secret_key=settings.secret_key)


def get_sign_in_provider(
    user_repo: SQLiteUserRepo = Depends(get_user_repo),
    auth_adapter: JWTAuthAdapter = Depends(get_auth_adapter),
    rules: Rules = Depends(get_rules),
) -> CredentialsProvider:
    return CredentialsProvider(
        user_repo=user_repo, hasher=auth_adapter, tokens=auth_adapter, rules=rules.auth
    )


# --- Forms ---
async def get_form(request: Request) -> dict[str, Any]:
    """Raw form submission as a plain dict (last value wins for repeated keys)."""
    form = await request.form()
    return {key: value for key, value in form.items()}
