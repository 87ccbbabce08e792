"""Shared test fixtures and configuration for the GCP samples test suite.

Provides fake clients and an isolated settings environment.
"""

from __future__ import annotations

from collections.abc import Generator
import os

import pytest

from gcp_samples.core.config import get_settings
from tests.fakes.clients import FakeGrafeasClient, FakeHealthcareService

# Never reach real Google Cloud from the test suite
os.environ["ENVIRONMENT"] = "testing"
os.environ.pop("GOOGLE_APPLICATION_CREDENTIALS", None)
os.environ.pop("GOOGLE_APPLICATION_CREDENTIALS_JSON", None)

SETTINGS_ENV_VARS = (
    "DEBUG",
    "LOG_LEVEL",
    "GOOGLE_CLOUD_PROJECT",
    "GOOGLE_APPLICATION_CREDENTIALS",
    "GOOGLE_APPLICATION_CREDENTIALS_JSON",
    "HEALTHCARE_LOCATION",
    "HEALTHCARE_API_VERSION",
    "PUBSUB_RECEIVE_TIMEOUT",
    "PUBSUB_MAX_PENDING",
)


@pytest.fixture(autouse=True)
def clean_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> Generator[None, None, None]:
    """Isolate every test from the developer's environment and ``.env`` file."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Settings read .env relative to the working directory
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def grafeas_client() -> FakeGrafeasClient:
    """Fake Grafeas client."""
    return FakeGrafeasClient()


@pytest.fixture
def healthcare_service() -> FakeHealthcareService:
    """Fake Healthcare discovery resource."""
    return FakeHealthcareService()
