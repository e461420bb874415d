"""
Centralized configuration with environment variable overrides.

Backend location, request timeouts, paging defaults, export naming and
the local storage path are all configurable here. Nothing is hardcoded
in view or API logic.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from autoservice.logging_context import ViewIdFilter

load_dotenv()

logger = logging.getLogger(__name__)


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class BackendConfig:
    """REST backend location and request limits."""

    base_url: str = os.getenv("BACKEND_URL", "http://localhost:5000")
    timeout_seconds: float = _safe_float("REQUEST_TIMEOUT_SECONDS", "10")


@dataclass(frozen=True)
class PaginationConfig:
    """Fallback paging used before the viewport width is known."""

    default_items_per_page: int = _safe_int("DEFAULT_ITEMS_PER_PAGE", "5")


@dataclass(frozen=True)
class ExportConfig:
    """Where exported artifacts land and how they are titled."""

    export_dir: str = os.getenv("EXPORT_DIR", ".")
    title: str = os.getenv("EXPORT_TITLE", "Booked Services")
    pdf_filename: str = "booked_services.pdf"
    excel_filename: str = "booked_services.xlsx"


@dataclass(frozen=True)
class StorageConfig:
    """Persisted client state (the userId set on sign-in)."""

    path: str = os.getenv(
        "STORAGE_PATH", str(Path.home() / ".autoservice" / "local_storage.json")
    )


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    backend: BackendConfig = field(default_factory=BackendConfig)
    pagination: PaginationConfig = field(default_factory=PaginationConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    app_name: str = os.getenv("APP_NAME", "AutoService")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if not config.backend.base_url.startswith(("http://", "https://")):
        raise ValueError(
            f"BACKEND_URL must start with http:// or https://, got {config.backend.base_url!r}"
        )
    if config.backend.timeout_seconds <= 0:
        raise ValueError(
            f"REQUEST_TIMEOUT_SECONDS must be > 0, got {config.backend.timeout_seconds}"
        )
    if config.pagination.default_items_per_page < 1:
        raise ValueError(
            "DEFAULT_ITEMS_PER_PAGE must be >= 1, "
            f"got {config.pagination.default_items_per_page}"
        )
    if not config.export.title.strip():
        raise ValueError("EXPORT_TITLE must not be empty")


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] [%(view_id)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, ViewIdFilter) for f in handler.filters):
            handler.addFilter(ViewIdFilter())
    logger.info("Configuration loaded for '%s' (backend %s)", config.app_name, config.backend.base_url)
    return config


# Singleton instance
settings = load_config()
