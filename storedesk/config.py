"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. Call get_settings() from entrypoints
(app shell, views) instead of reading os.environ directly.
"""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

from storedesk.utils.logger import get_logger

logger = get_logger(__name__)


# Load .env once at import time
load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r; using %r", name, raw, default)
        return default


@dataclass
class Settings:
    # Feature flags
    edit_products_release_5: bool = False

    # Orders
    orders_page_size: int = 25

    # Selected store, supplied per call to the order list view model
    site_id: Optional[int] = None

    # Logging
    log_level: str = "INFO"
    verbose: bool = False


def get_settings() -> Settings:
    """Return a new Settings instance read from the current environment."""
    return Settings(
        edit_products_release_5=_env_flag("SD_EDIT_PRODUCTS_RELEASE_5"),
        orders_page_size=_env_int("SD_ORDERS_PAGE_SIZE", 25),
        site_id=_env_int("SD_SITE_ID"),
        log_level=os.getenv("SD_LOG_LEVEL", "INFO").upper(),
        verbose=_env_flag("SD_VERBOSE"),
    )
