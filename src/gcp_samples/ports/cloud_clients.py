"""Structural interfaces for the Google Cloud clients used by the samples.

Only the methods the samples call are described. The real implementations are
``grafeas.grafeas_v1.GrafeasClient``, ``google.cloud.pubsub_v1.SubscriberClient``
and the Healthcare discovery resource built by ``googleapiclient``.
"""

from collections.abc import Callable, Iterable
from typing import Any, Protocol


class GrafeasClientPort(Protocol):
    """Note and occurrence operations of the Grafeas API."""

    def create_note(self, request: Any) -> Any:
        """Create a note and return it."""

    def update_note(self, request: Any) -> Any:
        """Update a note and return it."""

    def delete_note(self, request: Any) -> None:
        """Delete a note."""

    def get_note(self, request: Any) -> Any:
        """Return a single note."""

    def create_occurrence(self, request: Any) -> Any:
        """Create an occurrence and return it."""

    def update_occurrence(self, request: Any) -> Any:
        """Update an occurrence and return it."""

    def delete_occurrence(self, request: Any) -> None:
        """Delete an occurrence."""

    def get_occurrence(self, request: Any) -> Any:
        """Return a single occurrence."""

    def list_occurrences(self, request: Any) -> Iterable[Any]:
        """Return a pager over the occurrences matching the request."""

    def list_note_occurrences(self, request: Any) -> Iterable[Any]:
        """Return a pager over the occurrences attached to a note."""


class ReceivedMessagePort(Protocol):
    """A message handed to a streaming-pull callback."""

    data: bytes
    message_id: str

    def ack(self) -> None:
        """Acknowledge the message."""


class StreamingPullFuturePort(Protocol):
    """Handle on a running streaming pull."""

    def cancel(self) -> Any:
        """Ask the stream to shut down."""

    def done(self) -> bool:
        """Return True once the stream has stopped."""

    def result(self, timeout: float | None = None) -> Any:
        """Block until the stream stops, re-raising its error if any.

        Raises ``TimeoutError`` when ``timeout`` elapses first.
        """


class SubscriberClientPort(Protocol):
    """Subscription management and streaming pull of the Pub/Sub API."""

    def create_subscription(self, request: Any) -> Any:
        """Create a subscription and return it."""

    def subscribe(
        self,
        subscription: str,
        callback: Callable[[Any], Any],
        flow_control: Any = ...,
        await_callbacks_on_shutdown: bool = ...,  # noqa: FBT001
    ) -> StreamingPullFuturePort:
        """Start a streaming pull delivering messages to ``callback``."""


class HealthcareServicePort(Protocol):
    """Root of the Healthcare API discovery resource tree."""

    def projects(self) -> Any:
        """Return the ``projects`` collection."""
