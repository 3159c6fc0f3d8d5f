import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI

from invoice_actions import __version__
from invoice_actions.adapters.cache import InMemoryPathCache
from invoice_actions.adapters.sqlite.database import Database
from invoice_actions.adapters.sqlite.migrator import SQLiteMigrator
from invoice_actions.api.deps import get_settings
from invoice_actions.api.routes import auth, invoices
from invoice_actions.rules.loader import load_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the store at startup, close it at shutdown."""
    settings = get_settings()

    # Fail fast on a broken rules file
    load_rules(settings.rules_path)
    logger.info("Rules loaded from %s", settings.rules_path)

    Path(settings.db_path).parent.mkdir(parents=True, exist_ok=True)
    SQLiteMigrator(settings.db_path).run_migrations()

    db = Database(settings.db_path).open()
    app.state.db = db
    app.state.path_cache = InMemoryPathCache()
    logger.info("Database opened at %s", settings.db_path)
    try:
        yield
    finally:
        db.close()
        logger.info("Database closed")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Invoice Actions API",
        version=__version__,
        lifespan=lifespan,
    )

    # --- Routers ---
    app.include_router(invoices.router, tags=["Invoices"])
    app.include_router(auth.router, tags=["Auth"])

    @app.get("/health")
    def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "service": "invoice-actions"}

    return app


app = create_app()
