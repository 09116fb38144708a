from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container, db_config_from_settings
from .database.bootstrap import init_store
from .members.controller import register as register_members
from .system.controller import register as register_system

logger = logging.getLogger(__name__)

SETTING_KEYS = (
    "DATA_DIR",
    "DB_FILE_NAME",
    "DB_TIMEOUT",
    "LATE_CUTOFF",
    "APP_VERSION",
    "QR_SECRET",
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
)


def load_settings(overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {key: getattr(module, key) for key in SETTING_KEYS if hasattr(module, key)}
    settings["SETTINGS_MODULE"] = settings_module
    settings.update(overrides or {})
    return settings


def create_app(overrides: Optional[dict[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    settings = load_settings(overrides)

    logging.basicConfig(
        level=str(settings.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = Flask(__name__)
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))

    # A store that cannot be created is fatal: let StorageError propagate.
    db_path = init_store(db_config_from_settings(settings))
    logger.info("settings=%s store=%s", settings["SETTINGS_MODULE"], db_path)

    container = build_container(settings=settings)
    app.extensions["prefect_attendance"] = container

    register_attendance(app, container)
    register_members(app, container)
    register_system(app, container)

    return app
