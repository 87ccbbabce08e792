"""GCP Samples - Configuration Management.

Environment-based configuration using Pydantic settings. Every value can be
supplied through the environment or a local ``.env`` file.
"""

from functools import lru_cache
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from gcp_samples.core.exceptions import MissingConfigurationError

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """Sample settings with local-development defaults."""

    # Environment settings
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Google Cloud project and credentials
    google_cloud_project: str = Field(default="", alias="GOOGLE_CLOUD_PROJECT")
    google_application_credentials: str = Field(
        default="", alias="GOOGLE_APPLICATION_CREDENTIALS"
    )
    google_application_credentials_json: str = Field(
        default="",
        alias="GOOGLE_APPLICATION_CREDENTIALS_JSON",
        description="Service account key content, used instead of a key file",
        repr=False,
    )

    # Healthcare API settings
    healthcare_location: str = Field(default="us-central1", alias="HEALTHCARE_LOCATION")
    healthcare_api_version: str = Field(default="v1", alias="HEALTHCARE_API_VERSION")

    # Pub/Sub receive session settings
    pubsub_receive_timeout: float = Field(
        default=20.0,
        gt=0,
        alias="PUBSUB_RECEIVE_TIMEOUT",
        description="Seconds a receive session listens before returning",
    )
    pubsub_max_pending: int = Field(
        default=100,
        gt=0,
        alias="PUBSUB_MAX_PENDING",
        description="Messages buffered between delivery callbacks and the consumer",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def normalise_log_level(cls, value: str) -> str:
        """Upper-case the log level and reject unknown names."""
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            msg = f"LOG_LEVEL must be one of {sorted(VALID_LOG_LEVELS)}, got {value!r}"
            raise ValueError(msg)
        return level

    def require_project_id(self, override: str | None = None) -> str:
        """Return the project to act on, preferring an explicit override.

        Raises:
            MissingConfigurationError: if neither the override nor
                GOOGLE_CLOUD_PROJECT is set
        """
        project_id = override or self.google_cloud_project
        if not project_id:
            raise MissingConfigurationError("GOOGLE_CLOUD_PROJECT")
        return project_id

    def log_configuration_summary(self) -> None:
        """Log configuration summary for debugging."""
        logger.info("GCP samples configuration:")
        logger.info("   • Environment: %s", self.environment)
        logger.info("   • Debug mode: %s", self.debug)
        logger.info("   • Project: %s", self.google_cloud_project or "Not set")
        logger.info(
            "   • Credentials: %s",
            "inline JSON"
            if self.google_application_credentials_json
            else self.google_application_credentials or "application default",
        )
        logger.info("   • Healthcare location: %s", self.healthcare_location)
        logger.info("   • Pub/Sub receive timeout: %ss", self.pubsub_receive_timeout)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings."""
    settings = Settings()

    if settings.debug or settings.log_level == "DEBUG":
        settings.log_configuration_summary()

    return settings
