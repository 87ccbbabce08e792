"""Ports layer - contracts of the injected Google Cloud client handles.

The sample operations depend on these structural interfaces rather than on
concrete client classes, so the real clients and the test fakes are
interchangeable.
"""

from gcp_samples.ports.cloud_clients import (
    GrafeasClientPort,
    HealthcareServicePort,
    ReceivedMessagePort,
    StreamingPullFuturePort,
    SubscriberClientPort,
)

__all__ = [
    "GrafeasClientPort",
    "HealthcareServicePort",
    "ReceivedMessagePort",
    "StreamingPullFuturePort",
    "SubscriberClientPort",
]
