"""GCP Samples - Logging Configuration.

Console logging for the sample CLI with a compact format by default and a
detailed one in debug mode.
"""

import logging
import logging.config
import sys
from typing import Any

from gcp_samples.core.config import Settings, get_settings

# Client library loggers that are chatty below WARNING
NOISY_LOGGERS = (
    "google.api_core",
    "google.auth",
    "google.cloud.pubsub_v1",
    "googleapiclient.discovery",
    "googleapiclient.discovery_cache",
    "urllib3",
)


def build_logging_config(settings: Settings) -> dict[str, Any]:
    """Build the ``dictConfig`` mapping for the given settings."""
    library_level = settings.log_level if settings.debug else "WARNING"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": (
                    "%(asctime)s | %(name)s | %(levelname)s | "
                    "%(filename)s:%(lineno)d | %(funcName)s | %(message)s"
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "simple": {
                "format": "%(asctime)s | %(levelname)s | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.log_level,
                "formatter": "detailed" if settings.debug else "simple",
                # stdout carries the sample output
                "stream": sys.stderr,
            },
        },
        "loggers": {
            "gcp_samples": {"level": settings.log_level, "propagate": True},
            **{
                name: {"level": library_level, "propagate": True}
                for name in NOISY_LOGGERS
            },
        },
        "root": {
            "level": settings.log_level,
            "handlers": ["console"],
        },
    }


def setup_logging(settings: Settings | None = None) -> None:
    """Configure logging for the samples based on settings."""
    settings = settings or get_settings()
    logging.config.dictConfig(build_logging_config(settings))

    logger = logging.getLogger(__name__)
    logger.debug(
        "Logging configured for %s environment with level %s",
        settings.environment,
        settings.log_level,
    )
