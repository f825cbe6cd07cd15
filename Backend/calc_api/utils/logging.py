"""Central logging configuration utilities."""
from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Union

ACCESS_LOGGER = "calc_api.access"


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure application-wide logging.

    Request lines go through ``calc_api.access``; uvicorn's own access logger
    is muted so each request is logged once.
    """
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "rich": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "rich",
                    "level": level,
                }
            },
            "loggers": {
                "": {
                    "handlers": ["console"],
                    "level": level,
                },
                ACCESS_LOGGER: {
                    "level": logging.INFO,
                },
                "uvicorn.access": {
                    "level": logging.WARNING,
                },
            },
        }
    )
