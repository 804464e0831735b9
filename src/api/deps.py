import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.auth.crypto import JWTTokenIssuer, PasslibPasswordHasher
from src.adapters.clock import SystemClock
from src.adapters.navigation import RaisingRedirector
from src.adapters.revalidation import InMemoryPageCache
from src.adapters.sqlite.repos import SQLiteInvoiceRepo, SQLiteUserRepo
from src.adapters.sqlite_db import SQLiteGateway
from src.components.invoices import InvoiceActionConfig
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("DASHBOARD_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "dashboard.db")
        self.rules_path = self.base_dir / "rules.yaml"
        self.secret_key = os.environ.get("DASHBOARD_SECRET_KEY", "dev-secret-unsafe")


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _load_rules_cached(rules_path: Path) -> Rules:
    return load_rules(rules_path)


def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules_cached(settings.rules_path)


def get_invoice_config(rules: Rules = Depends(get_rules)) -> InvoiceActionConfig:
    return InvoiceActionConfig(listing_path=rules.invoices.listing_path)


# --- Persistence ---
def get_gateway(settings: Settings = Depends(get_settings)) -> SQLiteGateway:
    return SQLiteGateway(settings.db_path)


def get_invoice_repo(settings: Settings = Depends(get_settings)) -> SQLiteInvoiceRepo:
    return SQLiteInvoiceRepo(settings.db_path)


def get_user_repo(settings: Settings = Depends(get_settings)) -> SQLiteUserRepo:
    return SQLiteUserRepo(settings.db_path)


# --- Page cache & navigation ---
# Page cache singleton: rendered pages are shared across requests.
_page_cache_instance: InMemoryPageCache | None = None


def get_page_cache() -> InMemoryPageCache:
    """Get page cache singleton."""
    global _page_cache_instance
    if _page_cache_instance is None:
        _page_cache_instance = InMemoryPageCache()
    return _page_cache_instance


def get_redirector() -> RaisingRedirector:
    return RaisingRedirector()


# Time adapter for deterministic time operations
_clock_instance: SystemClock | None = None


def get_clock() -> SystemClock:
    """Get clock singleton."""
    global _clock_instance
    if _clock_instance is None:
        _clock_instance = SystemClock()
    return _clock_instance


# --- Auth ---
def get_password_hasher() -> PasslibPasswordHasher:
    return PasslibPasswordHasher()


def get_token_issuer(
    settings: Settings = Depends(get_settings),
    rules: Rules = Depends(get_rules),
) -> JWTTokenIssuer:
    return JWTTokenIssuer(settings.secret_key, rules.auth.sessions.ttl_minutes)
