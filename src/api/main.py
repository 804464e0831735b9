import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from src.adapters.navigation import RedirectRequired
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.api.deps import get_settings
from src.app_shell.config import validate_ops_rules
from src.rules.loader import load_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        rules = load_rules(settings.rules_path)
        validate_ops_rules(rules, settings.base_dir)
        logger.info("Rules loaded from %s", settings.rules_path)
    except Exception:
        logger.critical("Rules load failed", exc_info=True)
        sys.exit(1)

    settings.data_dir.mkdir(parents=True, exist_ok=True)
    migrations_dir = settings.base_dir / rules.ops.migrations_dir
    SQLiteMigrator(settings.db_path, str(migrations_dir)).run_migrations()

    yield


app = FastAPI(
    title="Invoice Dashboard API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.exception_handler(RedirectRequired)
async def redirect_handler(request: Request, exc: RedirectRequired) -> RedirectResponse:
    return RedirectResponse(exc.path, status_code=exc.status_code)


# --- Routers ---
from src.api.routes import auth, invoices  # noqa: E402

app.include_router(auth.router, prefix="", tags=["Auth"])
app.include_router(invoices.router, prefix="/dashboard/invoices", tags=["Invoices"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
