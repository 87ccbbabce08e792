"""Tests for environment-based settings."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError
import pytest

from gcp_samples.core.config import Settings, get_settings
from gcp_samples.core.exceptions import MissingConfigurationError


class TestSettingsDefaults:
    """Test default values."""

    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.environment == "testing"
        assert settings.google_cloud_project == ""
        assert settings.healthcare_location == "us-central1"
        assert settings.healthcare_api_version == "v1"
        assert settings.pubsub_receive_timeout == 20.0
        assert settings.pubsub_max_pending == 100
        assert settings.log_level == "INFO"

    def test_environment_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "env-project")
        monkeypatch.setenv("HEALTHCARE_LOCATION", "europe-west4")
        monkeypatch.setenv("PUBSUB_RECEIVE_TIMEOUT", "2.5")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.google_cloud_project == "env-project"
        assert settings.healthcare_location == "europe-west4"
        assert settings.pubsub_receive_timeout == 2.5
        assert settings.log_level == "DEBUG"

    def test_dotenv_file(self) -> None:
        Path(".env").write_text("GOOGLE_CLOUD_PROJECT=dotenv-project\n", encoding="utf-8")

        assert Settings().google_cloud_project == "dotenv-project"

    def test_credentials_json_hidden_from_repr(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS_JSON", '{"secret": "key"}')

        assert "secret" not in repr(Settings())


class TestSettingsValidation:
    """Test field validation."""

    def test_rejects_non_positive_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PUBSUB_RECEIVE_TIMEOUT", "0")

        with pytest.raises(ValidationError):
            Settings()

    def test_rejects_non_positive_max_pending(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PUBSUB_MAX_PENDING", "-5")

        with pytest.raises(ValidationError):
            Settings()

    def test_rejects_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError, match="LOG_LEVEL"):
            Settings()


class TestRequireProjectId:
    """Test project resolution."""

    def test_override_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "env-project")

        assert Settings().require_project_id("cli-project") == "cli-project"

    def test_falls_back_to_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "env-project")

        assert Settings().require_project_id() == "env-project"

    def test_missing_project_raises(self) -> None:
        with pytest.raises(MissingConfigurationError) as excinfo:
            Settings().require_project_id()
        assert excinfo.value.config_key == "GOOGLE_CLOUD_PROJECT"


class TestGetSettings:
    """Test the cached accessor."""

    def test_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_debug_logs_summary(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "summary-project")

        with caplog.at_level(logging.INFO, logger="gcp_samples.core.config"):
            get_settings()

        assert any("summary-project" in msg for msg in caplog.messages)
