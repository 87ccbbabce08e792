"""Factories for the Google Cloud client handles used by the samples.

The sample operations never construct clients themselves; callers build one
here (or bring their own) and pass it in.
"""

import logging
from typing import Any

from google.auth.credentials import Credentials
from google.cloud import pubsub_v1
from google.cloud.devtools import containeranalysis_v1
from googleapiclient import discovery
from grafeas import grafeas_v1

from gcp_samples.core.exceptions import IntegrationError

logger = logging.getLogger(__name__)


def create_grafeas_client(
    credentials: Credentials | None = None,
) -> grafeas_v1.GrafeasClient:
    """Build a Grafeas client bound to the Container Analysis endpoint."""
    try:
        analysis_client = containeranalysis_v1.ContainerAnalysisClient(
            credentials=credentials
        )
        return analysis_client.get_grafeas_client()
    except Exception as e:
        logger.exception("Failed to create Container Analysis client")
        msg = f"containeranalysis client: {e!s}"
        raise IntegrationError(msg) from e


def create_subscriber_client(
    credentials: Credentials | None = None,
) -> pubsub_v1.SubscriberClient:
    """Build a Pub/Sub subscriber client."""
    try:
        return pubsub_v1.SubscriberClient(credentials=credentials)
    except Exception as e:
        logger.exception("Failed to create Pub/Sub subscriber client")
        msg = f"pubsub client: {e!s}"
        raise IntegrationError(msg) from e


def create_healthcare_service(
    credentials: Credentials | None = None, api_version: str = "v1"
) -> Any:
    """Build the Healthcare API discovery resource."""
    try:
        return discovery.build(
            "healthcare",
            api_version,
            credentials=credentials,
            cache_discovery=False,
        )
    except Exception as e:
        logger.exception("Failed to create Healthcare API service")
        msg = f"healthcare client: {e!s}"
        raise IntegrationError(msg) from e
