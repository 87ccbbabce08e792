"""Google Cloud Platform credentials management.

Resolves the credentials handed to the client factories, in order of
preference:

1. ``GOOGLE_APPLICATION_CREDENTIALS_JSON`` - service account key content,
   typically injected from a secret store in containers
2. ``GOOGLE_APPLICATION_CREDENTIALS`` - path to a service account key file
3. Application Default Credentials (gcloud user login, metadata server)
"""

import json
import logging
from pathlib import Path

import google.auth
from google.auth.credentials import Credentials
from google.oauth2 import service_account

from gcp_samples.core.config import Settings, get_settings
from gcp_samples.core.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"


class GCPCredentialsManager:
    """Resolves and caches Google Cloud credentials for the samples."""

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the credentials manager."""
        self.settings = settings or get_settings()
        self._credentials: Credentials | None = None
        self._project_id: str | None = None

    def get_credentials(self) -> Credentials:
        """Return the resolved credentials, resolving them on first use."""
        if self._credentials is None:
            self._credentials, self._project_id = self._resolve()
        return self._credentials

    def get_project_id(self) -> str | None:
        """Get the project ID the credentials belong to, if known.

        Returns:
            Project ID or None if the credentials don't carry one
        """
        self.get_credentials()
        return self._project_id

    def _resolve(self) -> tuple[Credentials, str | None]:
        if self.settings.google_application_credentials_json:
            logger.info("Using credentials from GOOGLE_APPLICATION_CREDENTIALS_JSON")
            return self._from_json(self.settings.google_application_credentials_json)

        if self.settings.google_application_credentials:
            return self._from_file(Path(self.settings.google_application_credentials))

        logger.info("Using application default credentials")
        credentials, project_id = google.auth.default(scopes=[CLOUD_PLATFORM_SCOPE])
        return credentials, project_id

    @staticmethod
    def _from_json(credentials_json: str) -> tuple[Credentials, str | None]:
        """Build service account credentials from key content.

        Args:
            credentials_json: JSON string containing the service account key
        """
        try:
            info = json.loads(credentials_json)
        except json.JSONDecodeError as e:
            # Never echo key material
            raise InvalidConfigurationError(
                "GOOGLE_APPLICATION_CREDENTIALS_JSON", "<redacted>", "not valid JSON"
            ) from e

        try:
            credentials = service_account.Credentials.from_service_account_info(
                info, scopes=[CLOUD_PLATFORM_SCOPE]
            )
        except ValueError as e:
            raise InvalidConfigurationError(
                "GOOGLE_APPLICATION_CREDENTIALS_JSON",
                "<redacted>",
                "not a service account key",
            ) from e
        return credentials, info.get("project_id")

    @staticmethod
    def _from_file(path: Path) -> tuple[Credentials, str | None]:
        if not path.exists():
            raise InvalidConfigurationError(
                "GOOGLE_APPLICATION_CREDENTIALS", str(path), "file not found"
            )

        logger.info("Using service account file: %s", path)
        try:
            credentials = service_account.Credentials.from_service_account_file(
                str(path), scopes=[CLOUD_PLATFORM_SCOPE]
            )
        except ValueError as e:
            raise InvalidConfigurationError(
                "GOOGLE_APPLICATION_CREDENTIALS", str(path), "not a service account key"
            ) from e
        return credentials, credentials.project_id
