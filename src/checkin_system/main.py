from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from .auth.controller import register as register_auth
from .checkins.controller import register as register_checkins
from .config import get_settings_module
from .container import build_container
from .core.enums import StorageBackend
from .logging_config import setup_logging
from .review.controller import register as register_review
from .storage.bootstrap import apply_schema, list_tables
from .storage.connection import DBConfig, describe

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_DIR", "") or None)

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    backend = StorageBackend(getattr(settings, "STORAGE_BACKEND", StorageBackend.FILE.value))
    db_config = getattr(settings, "DB_CONFIG", {})
    if backend == StorageBackend.MYSQL:
        logger.info("settings=%s storage=mysql db=%s", settings_module, describe(DBConfig.from_dict(db_config)))
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    else:
        logger.info("settings=%s storage=%s", settings_module, backend.value)

    container = build_container(settings=settings)
    app.extensions["checkin_container"] = container

    register_checkins(app, container)
    register_auth(app, container)
    register_review(app, container)

    return app
