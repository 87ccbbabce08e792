"""Global pytest configuration for logging setup.

This file ensures consistent logging behavior across all tests
and keeps caplog able to capture records from every sample module.
"""

import logging

import pytest

LOGGERS_TO_CONFIGURE = (
    "gcp_samples.core.decorators",
    "gcp_samples.core.config",
    "gcp_samples.services",
    "gcp_samples.cli",
)


@pytest.fixture(autouse=True)
def setup_logging() -> None:
    """Route sample loggers to the root logger at DEBUG level."""
    for logger_name in LOGGERS_TO_CONFIGURE:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.DEBUG)
        # Propagation lets caplog see the records
        logger.propagate = True

    logging.getLogger("gcp_samples").setLevel(logging.DEBUG)
    logging.getLogger().setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def configure_caplog(caplog: pytest.LogCaptureFixture) -> None:
    """Capture DEBUG records from all sample modules."""
    caplog.set_level(logging.DEBUG)
    caplog.set_level(logging.DEBUG, logger="gcp_samples")
