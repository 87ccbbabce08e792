"""Tests for GCP credentials resolution."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from gcp_samples.core.config import Settings
from gcp_samples.core.exceptions import InvalidConfigurationError
from gcp_samples.services.gcp_credentials import (
    CLOUD_PLATFORM_SCOPE,
    GCPCredentialsManager,
)

SERVICE_ACCOUNT_INFO = {
    "type": "service_account",
    "project_id": "key-project",
    "client_email": "samples@key-project.iam.gserviceaccount.com",
}


class TestGCPCredentialsManager:
    """Test credential source selection."""

    def test_json_credentials_take_precedence(self, tmp_path: Path) -> None:
        key_file = tmp_path / "key.json"
        key_file.write_text("{}")
        settings = Settings(
            GOOGLE_APPLICATION_CREDENTIALS_JSON=json.dumps(SERVICE_ACCOUNT_INFO),
            GOOGLE_APPLICATION_CREDENTIALS=str(key_file),
        )
        credentials = Mock()

        with patch(
            "gcp_samples.services.gcp_credentials.service_account.Credentials"
            ".from_service_account_info",
            return_value=credentials,
        ) as from_info:
            manager = GCPCredentialsManager(settings)

            assert manager.get_credentials() is credentials
            assert manager.get_project_id() == "key-project"

        from_info.assert_called_once_with(
            SERVICE_ACCOUNT_INFO, scopes=[CLOUD_PLATFORM_SCOPE]
        )

    def test_invalid_json_is_redacted(self) -> None:
        settings = Settings(GOOGLE_APPLICATION_CREDENTIALS_JSON="{private-key-material")
        manager = GCPCredentialsManager(settings)

        with pytest.raises(InvalidConfigurationError) as excinfo:
            manager.get_credentials()

        assert excinfo.value.config_key == "GOOGLE_APPLICATION_CREDENTIALS_JSON"
        assert "private-key-material" not in str(excinfo.value)
        assert "<redacted>" in str(excinfo.value)

    def test_json_missing_key_fields(self) -> None:
        incomplete = {"type": "service_account", "project_id": "key-project"}
        settings = Settings(GOOGLE_APPLICATION_CREDENTIALS_JSON=json.dumps(incomplete))
        manager = GCPCredentialsManager(settings)

        with pytest.raises(InvalidConfigurationError) as excinfo:
            manager.get_credentials()

        assert excinfo.value.config_key == "GOOGLE_APPLICATION_CREDENTIALS_JSON"
        assert "not a service account key" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_key_file_missing_key_fields(self, tmp_path: Path) -> None:
        key_file = tmp_path / "key.json"
        key_file.write_text("{}")
        manager = GCPCredentialsManager(
            Settings(GOOGLE_APPLICATION_CREDENTIALS=str(key_file))
        )

        with pytest.raises(InvalidConfigurationError, match="not a service account key"):
            manager.get_credentials()

    def test_service_account_file(self, tmp_path: Path) -> None:
        key_file = tmp_path / "key.json"
        key_file.write_text(json.dumps(SERVICE_ACCOUNT_INFO))
        settings = Settings(GOOGLE_APPLICATION_CREDENTIALS=str(key_file))
        credentials = Mock(project_id="file-project")

        with patch(
            "gcp_samples.services.gcp_credentials.service_account.Credentials"
            ".from_service_account_file",
            return_value=credentials,
        ) as from_file:
            manager = GCPCredentialsManager(settings)

            assert manager.get_credentials() is credentials
            assert manager.get_project_id() == "file-project"

        from_file.assert_called_once_with(str(key_file), scopes=[CLOUD_PLATFORM_SCOPE])

    def test_missing_service_account_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.json"
        settings = Settings(GOOGLE_APPLICATION_CREDENTIALS=str(missing))
        manager = GCPCredentialsManager(settings)

        with pytest.raises(InvalidConfigurationError, match="file not found"):
            manager.get_credentials()

    def test_application_default_credentials(self) -> None:
        credentials = Mock()

        with patch(
            "gcp_samples.services.gcp_credentials.google.auth.default",
            return_value=(credentials, "adc-project"),
        ) as default:
            manager = GCPCredentialsManager(Settings())

            assert manager.get_credentials() is credentials
            assert manager.get_project_id() == "adc-project"

        default.assert_called_once_with(scopes=[CLOUD_PLATFORM_SCOPE])

    def test_credentials_are_resolved_once(self) -> None:
        with patch(
            "gcp_samples.services.gcp_credentials.google.auth.default",
            return_value=(Mock(), None),
        ) as default:
            manager = GCPCredentialsManager(Settings())
            first = manager.get_credentials()
            second = manager.get_credentials()

        assert first is second
        assert manager.get_project_id() is None
        default.assert_called_once()

    def test_defaults_to_cached_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "env-project")

        manager = GCPCredentialsManager()

        assert manager.settings.google_cloud_project == "env-project"
