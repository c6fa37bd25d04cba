"""
Centralized configuration with environment variable overrides.

Capacity limits, the booking window, and storage location are all
configurable here. Nothing is hardcoded in ledger, store, or form logic.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from consignment_booking.logging_context import SessionIdFilter

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


@dataclass(frozen=True)
class CapacityConfig:
    """Per-day capacity and booking window settings."""

    max_items_per_day: int = _safe_int("MAX_ITEMS_PER_DAY", "80")
    booking_window_days: int = _safe_int("BOOKING_WINDOW_DAYS", "6")


@dataclass(frozen=True)
class StorageConfig:
    """Where the booking list is persisted."""

    path: str = os.getenv("BOOKING_STORAGE_PATH", "bookings.json")
    key: str = os.getenv("BOOKING_STORAGE_KEY", "bookings")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    capacity: CapacityConfig = field(default_factory=CapacityConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    business_name: str = os.getenv("BUSINESS_NAME", "Consignment Booking")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if config.capacity.max_items_per_day < 1:
        raise ValueError(
            f"MAX_ITEMS_PER_DAY must be >= 1, got {config.capacity.max_items_per_day}"
        )
    if config.capacity.booking_window_days < 1:
        raise ValueError(
            f"BOOKING_WINDOW_DAYS must be >= 1, got {config.capacity.booking_window_days}"
        )
    if not config.storage.key.strip():
        raise ValueError("BOOKING_STORAGE_KEY must not be empty")
    if not config.storage.path.strip():
        raise ValueError("BOOKING_STORAGE_PATH must not be empty")


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] [%(session_id)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, SessionIdFilter) for f in handler.filters):
            handler.addFilter(SessionIdFilter())
    logger.info("Configuration loaded for '%s'", config.business_name)
    return config


# Singleton instance
settings = load_config()
