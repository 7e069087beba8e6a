"""Logging configuration."""

import logging
import logging.config
from typing import Any

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_logging_config(level: str = "INFO") -> dict[str, Any]:
    """Return a dictConfig dictionary with a console handler for the docstore logger."""
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": level,
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "docstore": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
    }


def setup_logging(level: str = "INFO") -> None:
    """Apply the logging configuration for the given level name."""
    logging.config.dictConfig(build_logging_config(level))
    logging.getLogger(__name__).debug("Logging configured successfully")
