from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def create_app(*, records=None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("[hr-attendance] settings=%s", settings_module)

    container = build_container(
        data_file=getattr(settings, "DATA_FILE", ""),
        tie_break=getattr(settings, "LEAVE_TIE_BREAK", "FIRST_MATCH"),
        records=records,
    )
    app.extensions["hr_attendance"] = container

    register_reports(app, container)

    return app
