"""Attendance Tracker package.

Organized by feature modules (employees, attendance, reports) over an
injectable store, with a thin Flask controller layer on top.
"""
from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container, build_storage
from .database.bootstrap import apply_schema, list_tables
from .attendance.controller import register as register_attendance
from .employees.controller import register as register_employees
from .reports.controller import register as register_reports

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(
        level=getattr(logging, str(getattr(settings, "LOG_LEVEL", "INFO")).upper(), logging.INFO),
        format=LOG_FORMAT,
    )

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    backend = str(getattr(settings, "STORAGE_BACKEND", "json")).lower()
    logger.info("settings=%s storage=%s", settings_module, backend)

    if container is None:
        if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            db_config = getattr(settings, "DB_CONFIG")
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(storage=build_storage(settings))

    app.extensions["attendance_tracker"] = container

    register_employees(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
