"""Application logging.

``create_app`` calls ``configure_logging`` with the ``LOG_LEVEL`` setting;
modules log through ``get_logger(__name__)``. Only the ``employee_tracker``
logger gets a handler, so Flask and SQLAlchemy keep their own configuration.
"""

import logging
import sys

PACKAGE_LOGGER = "employee_tracker"
HANDLER_NAME = "employee_tracker.stdout"
LINE_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Set the package log level, adding the stdout handler on first use."""
    level_no = logging.getLevelName(str(level).upper())
    package = logging.getLogger(PACKAGE_LOGGER)
    package.setLevel(level_no if isinstance(level_no, int) else logging.INFO)
    if not any(h.get_name() == HANDLER_NAME for h in package.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LINE_FORMAT, TIME_FORMAT))
        package.addHandler(handler)
    return package


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
