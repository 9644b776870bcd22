"""
Centralized configuration module for application-wide settings.

All values come from environment variables (entry points load `.env` through
python-dotenv before anything reads them). Accessors are plain functions so
tests can patch the environment and call them again.
"""

import logging
import os
from datetime import date, datetime
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./salon.db"
DEFAULT_INACTIVE_CLIENT_DAYS = 30
DEFAULT_DASHBOARD_LIST_LIMIT = 5

# ===========================
# Timezone Configuration
# ===========================


def get_app_timezone() -> ZoneInfo:
    """
    Get the application timezone from environment variable.

    Returns:
        ZoneInfo: Application timezone (defaults to UTC if not configured)

    Environment Variables:
        TZ: Timezone identifier (e.g., 'Europe/Madrid', 'UTC')
            Default: 'UTC'
    """
    tz_name = os.getenv("TZ", "UTC")

    try:
        return ZoneInfo(tz_name)
    except Exception as e:
        logger.warning(
            f"Invalid timezone '{tz_name}' specified in TZ environment variable. "
            f"Falling back to UTC. Error: {e}"
        )
        return ZoneInfo("UTC")


# Global timezone instance - initialized once at import time
APP_TZ = get_app_timezone()


def now_in_app_tz() -> datetime:
    """Current instant in the application timezone."""
    return datetime.now(APP_TZ)


def today_in_app_tz() -> date:
    """Current calendar date in the application timezone."""
    return now_in_app_tz().date()


def log_timezone_config():
    """Log the active timezone configuration."""
    logger.info(
        "Timezone configuration initialized",
        extra={
            "context": {
                "timezone": str(APP_TZ),
                "tz_env_var": os.getenv("TZ", "UTC"),
            }
        },
    )


# ===========================
# Storage Configuration
# ===========================


def get_database_url() -> str:
    """SQLAlchemy URL of the key-value medium holding the collections."""
    return os.getenv("DATABASE_URL", "").strip() or DEFAULT_DATABASE_URL


# ===========================
# Dashboard Configuration
# ===========================


def _get_int(key: str, default: int) -> int:
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(
            f"Invalid integer for {key}: '{raw}'. Using default {default}.",
            extra={"context": {"env_var": key, "value": raw}},
        )
        return default


def _get_bool(key: str, default: bool) -> bool:
    raw = os.getenv(key, "").strip().lower()
    if not raw:
        return default
    return raw in ("true", "1", "yes")


def get_inactive_client_days() -> int:
    """
    Days without a visit after which a client counts as inactive.

    Environment Variables:
        INACTIVE_CLIENT_DAYS: Default 30
    """
    return _get_int("INACTIVE_CLIENT_DAYS", DEFAULT_INACTIVE_CLIENT_DAYS)


def get_dashboard_list_limit() -> int:
    """Number of rows shown in dashboard lists (inactive clients, upcoming)."""
    return _get_int("DASHBOARD_LIST_LIMIT", DEFAULT_DASHBOARD_LIST_LIMIT)


# ===========================
# Logging Configuration
# ===========================


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_log_to_file() -> bool:
    return _get_bool("LOG_TO_FILE", False)


def get_log_json() -> bool:
    return _get_bool("LOG_JSON", False)
