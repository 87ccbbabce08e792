"""Pub/Sub samples - receiving Container Analysis occurrence events.

Container Analysis publishes a message to a well-known topic whenever an
occurrence is created or updated. These samples create a subscription on that
topic and listen to it for a bounded amount of time.
"""

import logging
import threading
import time
from typing import Any, TextIO

from google.cloud import pubsub_v1

from gcp_samples.core import resource_names
from gcp_samples.core.decorators import sample_operation
from gcp_samples.ports.cloud_clients import ReceivedMessagePort, SubscriberClientPort

logger = logging.getLogger(__name__)

DEFAULT_MAX_PENDING = 100


@sample_operation(log_level=logging.INFO)
def create_occurrence_subscription(
    subscriber: SubscriberClientPort, subscription_id: str, project_id: str
) -> Any:
    """Create a subscription listening to the occurrence topic and return it."""
    request = {
        "name": resource_names.subscription_path(project_id, subscription_id),
        # Receives a message whenever an occurrence is added or modified
        "topic": resource_names.occurrence_topic_path(project_id),
    }
    return subscriber.create_subscription(request=request)


class _MessageCounter:
    """Streaming-pull callback numbering, printing and acking each message.

    The client library invokes the callback from a pool of threads, so the
    counter and the output sink are guarded by a lock.
    """

    def __init__(self, out: TextIO | None) -> None:
        self._out = out
        self._lock = threading.Lock()
        self.count = 0

    def __call__(self, message: ReceivedMessagePort) -> None:
        payload = message.data.decode("utf-8", errors="replace")
        with self._lock:
            self.count += 1
            print(f"Message {self.count}: {payload!r}", file=self._out)
            message.ack()


@sample_operation(log_level=logging.INFO)
def receive_occurrence_messages(
    subscriber: SubscriberClientPort,
    subscription_id: str,
    project_id: str,
    timeout_seconds: float,
    out: TextIO | None = None,
    *,
    max_pending: int = DEFAULT_MAX_PENDING,
) -> int:
    """Listen to a subscription for ``timeout_seconds`` and count the messages.

    Every message is counted, printed and acked inside the callback. At the
    deadline the stream is cancelled and shutdown waits for callbacks still
    running, so each counted message is acked while the stream is live.

    Args:
        subscriber: Pub/Sub subscriber client
        subscription_id: Subscription to listen on
        project_id: Project owning the subscription
        timeout_seconds: Wall-clock listening time, measured from the call
        out: Output sink, ``sys.stdout`` when None
        max_pending: Maximum number of unacked messages held by the library

    Returns:
        Number of messages received and acknowledged
    """
    deadline = time.monotonic() + timeout_seconds
    subscription_name = resource_names.subscription_path(project_id, subscription_id)
    counter = _MessageCounter(out)

    future = subscriber.subscribe(
        subscription_name,
        callback=counter,
        flow_control=pubsub_v1.types.FlowControl(max_messages=max_pending),
        await_callbacks_on_shutdown=True,
    )
    logger.info("Listening on %s for %ss", subscription_name, timeout_seconds)

    try:
        future.result(timeout=max(deadline - time.monotonic(), 0))
    except TimeoutError:
        future.cancel()
        future.result()
    except Exception:
        logger.warning("Streaming pull on %s failed", subscription_name)
        future.cancel()
        raise

    # Shutdown has completed, no callback is still running
    count = counter.count
    print(count, file=out)
    return count
