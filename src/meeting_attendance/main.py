from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .config import get_settings_module
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig, DatabaseConnection
from .events.controller import register as register_events
from .members.controller import register as register_members
from .stats.controller import register as register_stats

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    """App factory.

    Tests pass a container built over in-memory stores; otherwise the
    MySQL-backed container is built from the selected settings module.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
            apply_schema(conn)
            logger.info("schema ready (tables=%d)", len(list_tables(conn)))

        container = build_container(
            db_config=db_config,
            cache_enabled=bool(getattr(settings, "QUERY_CACHE_ENABLED", True)),
            count_unmarked_as_absent=bool(getattr(settings, "COUNT_UNMARKED_AS_ABSENT", True)),
        )

    app.extensions["container"] = container

    register_error_handlers(app)
    register_members(app, container)
    register_events(app, container)
    register_attendance(app, container)
    register_stats(app, container)

    return app
