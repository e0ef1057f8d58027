from __future__ import annotations

import importlib
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from .assets.controller import register as register_assets
from .assignments.controller import register as register_assignments
from .attendance.controller import register as register_attendance
from .breaks.controller import register as register_breaks
from .common.logging import configure_logging, get_logger
from .common.responses import register_error_handlers
from .config import get_settings_module
from .container import build_container
from .database.bootstrap import import_models, init_schema, seed_demo_data
from .database.extensions import db
from .employees.controller import register as register_employees
from .flowace.controller import register as register_flowace
from .issues.controller import register as register_issues
from .logs.controller import register as register_logs
from .warnings.controller import register as register_warnings

logger = get_logger(__name__)


def create_app(overrides: Optional[dict[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config.from_object(settings)
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    logger.info("Starting employee tracker (settings=%s)", settings_module)

    db.init_app(app)
    import_models()
    register_error_handlers(app)

    container = build_container(break_warning_minutes=int(app.config.get("BREAK_WARNING_MINUTES", 30)))
    app.extensions["container"] = container

    register_employees(app, container)
    register_attendance(app, container)
    register_flowace(app, container)
    register_assets(app, container)
    register_assignments(app, container)
    register_logs(app, container)
    register_breaks(app, container)
    register_issues(app, container)
    register_warnings(app, container)

    if app.config.get("AUTO_INIT_DB"):
        with app.app_context():
            tables = init_schema(
                database_uri=app.config["SQLALCHEMY_DATABASE_URI"],
                db_config=app.config.get("DB_CONFIG", {}),
            )
            logger.info("Schema ready (tables=%d)", len(tables))
            if app.config.get("AUTO_SEED_DB"):
                seed_demo_data()

    return app


if __name__ == "__main__":
    create_app().run()
