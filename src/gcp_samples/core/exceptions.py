"""Custom exception hierarchy for the GCP samples.

Remote failures raised by the Google client libraries are never wrapped by a
single request call; they reach the caller unchanged. The classes here cover
the few places where the samples add their own context:

- a listing that fails after some elements were already emitted
- dataset deletion, which prefixes the remote error
- client construction and configuration problems
"""

from typing import Any


class SamplesBaseError(Exception):
    """Base exception for all gcp-samples specific errors.

    Carries an optional machine-readable error code and a details mapping.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {super().__str__()}"
        return super().__str__()


# ==============================================================================
# Integration Exceptions
# ==============================================================================


class IntegrationError(SamplesBaseError):
    """Raised when an operation against a Google Cloud API fails."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("error_code", "INTEGRATION_ERROR")
        super().__init__(message, **kwargs)


class ListingInterruptedError(IntegrationError):
    """Raised when a paginated listing fails part-way through.

    ``emitted`` is the number of elements already printed before the failure.
    The underlying client error is chained as ``__cause__`` and kept on
    ``cause``.
    """

    def __init__(
        self,
        resource: str,
        emitted: int,
        cause: BaseException,
        *,
        list_filter: str | None = None,
    ) -> None:
        message = f"Listing {resource} failed after {emitted} element(s): {cause!s}"
        super().__init__(
            message,
            error_code="LISTING_INTERRUPTED",
            details={"resource": resource, "filter": list_filter, "emitted": emitted},
        )
        self.resource = resource
        self.emitted = emitted
        self.cause = cause
        self.list_filter = list_filter


class DatasetDeletionError(IntegrationError):
    """Raised when a Healthcare dataset cannot be deleted."""

    def __init__(self, dataset_name: str, cause: BaseException) -> None:
        super().__init__(
            f"Delete: {cause!s}",
            error_code="DATASET_DELETION_ERROR",
            details={"dataset": dataset_name},
        )
        self.dataset_name = dataset_name
        self.cause = cause


# ==============================================================================
# Configuration Exceptions
# ==============================================================================


class ConfigurationError(SamplesBaseError):
    """Raised when configuration is invalid or missing."""

    def __init__(
        self, message: str, *, config_key: str | None = None, **kwargs: Any
    ) -> None:
        super().__init__(message, error_code="CONFIGURATION_ERROR", **kwargs)
        self.config_key = config_key


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, config_key: str) -> None:
        message = f"Missing required configuration: {config_key}"
        super().__init__(message, config_key=config_key)


class InvalidConfigurationError(ConfigurationError):
    """Raised when a configuration value is invalid."""

    def __init__(
        self, config_key: str, value: object, reason: str | None = None
    ) -> None:
        message = f"Invalid configuration value for {config_key}: {value}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, config_key=config_key)
        self.value = value
        self.reason = reason
