"""Logging setup shared by the API server, scripts and migrations."""

import logging
import logging.config


def configure_logging(level: str = "INFO") -> None:
    """Install a single console handler on the root logger."""
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "console",
                },
            },
            "root": {"level": level.upper(), "handlers": ["console"]},
            "loggers": {
                # uvicorn installs its own handlers
                "uvicorn": {"propagate": False},
            },
        }
    )
