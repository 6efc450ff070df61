#!/usr/bin/env python3

import logging
import logging.config
from typing import Any

from pythonjsonlogger import jsonlogger

from .env_utils import getenv_clean

# schema_file is attached by the parse service through `extra=`
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s %(schema_file)s"


def build_logging_config(level: str) -> dict[str, Any]:
    """dictConfig payload: JSON lines on stdout for the app and uvicorn."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {"()": jsonlogger.JsonFormatter, "format": LOG_FORMAT}
        },
        "handlers": {
            "console": {"class": "logging.StreamHandler", "formatter": "json", "stream": "ext://sys.stdout"}
        },
        "loggers": {
            "": {"handlers": ["console"], "level": level, "propagate": False},
            "uvicorn": {"handlers": ["console"], "level": "INFO", "propagate": False},
        },
    }


def setup_logging():
    """Setup JSON logging configuration, level taken from LOG_LEVEL"""
    level = (getenv_clean("LOG_LEVEL") or "INFO").upper()
    logging.config.dictConfig(build_logging_config(level))
