from __future__ import annotations

import importlib
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .api.controller import register as register_api
from .common.log import configure_level, get_logger
from .container import build_container

SETTING_NAMES = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "ROSTER_PATH",
    "WORKBOOK_PATH",
    "WINDOW_DAYS",
    "EMAIL_DOMAIN",
    "ID_PREFIX",
    "LOG_LEVEL",
)

logger = get_logger(__name__)


def load_settings(overrides: Optional[Mapping[str, Any]] = None) -> dict:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {name: getattr(module, name) for name in SETTING_NAMES if hasattr(module, name)}
    settings["SETTINGS_MODULE"] = settings_module
    settings.update(overrides or {})
    return settings


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    settings = load_settings(overrides)
    configure_level(str(settings.get("LOG_LEVEL", "INFO")))

    app = Flask(__name__)
    app.secret_key = settings.get("SECRET_KEY")
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))

    logger.info(
        "settings=%s roster=%s workbook=%s",
        settings["SETTINGS_MODULE"],
        settings.get("ROSTER_PATH") or "-",
        settings.get("WORKBOOK_PATH") or "-",
    )

    container = build_container(settings=settings)
    register_api(app, container)

    return app
