"""Resource name and filter composition for Google Cloud APIs.

Every identifier handled by the samples is a caller-supplied opaque string.
The helpers here only interpolate those strings into the path formats the
services expect; they never validate or normalise them.
"""

import json

# Container Analysis publishes occurrence create/update events on this topic
OCCURRENCE_TOPIC_ID = "container-analysis-occurrences-v1beta1"

DISCOVERY_KIND = "DISCOVERY"


def project_path(project_id: str) -> str:
    """Return ``projects/{project_id}``."""
    return f"projects/{project_id}"


def note_path(project_id: str, note_id: str) -> str:
    """Return ``projects/{project_id}/notes/{note_id}``."""
    return f"{project_path(project_id)}/notes/{note_id}"


def occurrence_path(project_id: str, occurrence_id: str) -> str:
    """Return ``projects/{project_id}/occurrences/{occurrence_id}``."""
    return f"{project_path(project_id)}/occurrences/{occurrence_id}"


def topic_path(project_id: str, topic_id: str) -> str:
    """Return ``projects/{project_id}/topics/{topic_id}``."""
    return f"{project_path(project_id)}/topics/{topic_id}"


def subscription_path(project_id: str, subscription_id: str) -> str:
    """Return ``projects/{project_id}/subscriptions/{subscription_id}``."""
    return f"{project_path(project_id)}/subscriptions/{subscription_id}"


def occurrence_topic_path(project_id: str) -> str:
    """Topic receiving Container Analysis occurrence events for a project."""
    return topic_path(project_id, OCCURRENCE_TOPIC_ID)


def dataset_path(project_id: str, location: str, dataset_id: str) -> str:
    """Return ``projects/{project_id}/locations/{location}/datasets/{dataset_id}``."""
    return f"{project_path(project_id)}/locations/{location}/datasets/{dataset_id}"


def quote(value: str) -> str:
    """Double-quote ``value`` with backslash escapes, as the filter grammar expects."""
    return json.dumps(value, ensure_ascii=False)


def resource_url_filter(image_url: str) -> str:
    """Filter selecting every occurrence attached to ``image_url``."""
    return f"resourceUrl={quote(image_url)}"


def discovery_filter(image_url: str) -> str:
    """Filter selecting the discovery occurrence of ``image_url``."""
    return f'kind="{DISCOVERY_KIND}" AND {resource_url_filter(image_url)}'
