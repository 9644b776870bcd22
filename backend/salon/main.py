import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from flask import Flask

# Only load from .env when DATABASE_URL is not already defined by the environment
if not os.getenv("DATABASE_URL"):
    load_dotenv()

logger = logging.getLogger(__name__)


def _mask_url_password(url: str) -> str:
    """Hide the password part of a database URL before logging it."""
    if "://" not in url or "@" not in url:
        return url
    scheme, rest = url.split("://", 1)
    credentials, host = rest.rsplit("@", 1)
    if ":" in credentials:
        user = credentials.split(":", 1)[0]
        return f"{scheme}://{user}:***@{host}"
    return url


def create_app(store=None, config_overrides: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Build the Flask application.

    Args:
        store: An already opened DataStore. When omitted the store is opened
            over the SQL record store at DATABASE_URL.
        config_overrides: Extra Flask config values (e.g. TESTING).
    """
    from salon.core import config
    from salon.core.api_utils import STORE_EXTENSION_KEY
    from salon.core.logging_config import setup_logging

    app = Flask(__name__)
    if config_overrides:
        app.config.update(config_overrides)

    setup_logging(
        app=app,
        log_level=config.get_log_level(),
        log_to_file=config.get_log_to_file(),
        use_json_format=config.get_log_json(),
    )
    config.log_timezone_config()

    if store is None:
        from salon.db.record_store import SqlRecordStore
        from salon.services.data_store import DataStore

        logger.info(
            "Opening data store",
            extra={
                "context": {"database_url": _mask_url_password(config.get_database_url())}
            },
        )
        store = DataStore.open(SqlRecordStore())

    app.extensions[STORE_EXTENSION_KEY] = store

    from salon.controllers.api_controller import api_bp
    from salon.controllers.dashboard_controller import dashboard_bp
    from salon.controllers.finance_controller import finance_bp
    from salon.controllers.health_controller import health_bp

    app.register_blueprint(api_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(finance_bp)
    app.register_blueprint(health_bp)

    logger.info(
        "Application created",
        extra={"context": {"blueprints": sorted(app.blueprints)}},
    )
    return app
