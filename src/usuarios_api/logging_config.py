"""Console logging setup shared by the API and the uvicorn entrypoints."""

from __future__ import annotations

import logging.config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Route the ``usuarios_api`` loggers to stderr at ``level``."""

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"format": LOG_FORMAT}},
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "usuarios_api": {
                    "handlers": ["console"],
                    "level": level.upper(),
                    "propagate": True,
                },
            },
        }
    )
