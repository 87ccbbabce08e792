"""Container Analysis samples - vulnerability notes and occurrences.

Each function builds one Grafeas request from caller-supplied identifiers,
sends it through the injected ``GrafeasClient`` and hands back the response.
Errors raised by the request call reach the caller unchanged.

A client is usually obtained with::

    from google.cloud.devtools import containeranalysis_v1

    client = containeranalysis_v1.ContainerAnalysisClient().get_grafeas_client()
"""

from collections.abc import Iterable, Sequence
import logging
from typing import Any, TextIO

from google.protobuf import field_mask_pb2
from grafeas import grafeas_v1

from gcp_samples.core import resource_names
from gcp_samples.core.decorators import audit_trail, sample_operation
from gcp_samples.core.exceptions import ListingInterruptedError
from gcp_samples.ports.cloud_clients import GrafeasClientPort

logger = logging.getLogger(__name__)


def _field_mask(paths: Sequence[str] | None) -> field_mask_pb2.FieldMask | None:
    if paths is None:
        return None
    return field_mask_pb2.FieldMask(paths=list(paths))


def _print_each(
    pager: Iterable[Any],
    out: TextIO | None,
    *,
    resource: str,
    list_filter: str | None = None,
) -> int:
    """Print every element of ``pager`` in cursor order and return the count.

    A failure while fetching the next element aborts the listing with a
    ``ListingInterruptedError`` that records how many elements were printed.
    """
    iterator = iter(pager)
    count = 0
    while True:
        try:
            occurrence = next(iterator)
        except StopIteration:
            break
        except Exception as e:
            logger.warning(
                "Listing %s interrupted after %d element(s)", resource, count
            )
            raise ListingInterruptedError(
                resource, count, e, list_filter=list_filter
            ) from e
        print(occurrence, file=out)
        count += 1
    return count


# ==============================================================================
# Notes
# ==============================================================================


@sample_operation()
def create_note(client: GrafeasClientPort, note_id: str, project_id: str) -> Any:
    """Create and return a new vulnerability note."""
    request = grafeas_v1.CreateNoteRequest(
        parent=resource_names.project_path(project_id),
        note_id=note_id,
        # Vulnerability details (severity, CVSS, affected packages) go here
        note=grafeas_v1.Note(vulnerability=grafeas_v1.VulnerabilityNote()),
    )
    return client.create_note(request=request)


@sample_operation()
def update_note(
    client: GrafeasClientPort,
    updated: Any,
    note_id: str,
    project_id: str,
    update_mask: Sequence[str] | None = None,
) -> Any:
    """Push an update to a note that already exists on the server.

    Args:
        client: Grafeas client
        updated: Replacement ``Note`` (or an equivalent mapping)
        note_id: Note identifier
        project_id: Project owning the note
        update_mask: Field paths to update; the whole note when omitted

    Returns:
        The updated note
    """
    request = grafeas_v1.UpdateNoteRequest(
        name=resource_names.note_path(project_id, note_id),
        note=updated,
    )
    mask = _field_mask(update_mask)
    if mask is not None:
        request.update_mask = mask
    return client.update_note(request=request)


@audit_trail("delete_note", resource_param="note_id")
@sample_operation()
def delete_note(client: GrafeasClientPort, note_id: str, project_id: str) -> None:
    """Remove an existing note from the server."""
    request = grafeas_v1.DeleteNoteRequest(
        name=resource_names.note_path(project_id, note_id)
    )
    client.delete_note(request=request)


@sample_operation()
def get_note(
    client: GrafeasClientPort,
    note_id: str,
    project_id: str,
    out: TextIO | None = None,
) -> Any:
    """Retrieve, print and return a note."""
    request = grafeas_v1.GetNoteRequest(
        name=resource_names.note_path(project_id, note_id)
    )
    note = client.get_note(request=request)
    print(note, file=out)
    return note


# ==============================================================================
# Occurrences
# ==============================================================================


@sample_operation()
def create_occurrence(
    client: GrafeasClientPort,
    image_url: str,
    note_id: str,
    occurrence_project_id: str,
    note_project_id: str,
) -> Any:
    """Create and return an occurrence of a previously created note.

    The occurrence lives in ``occurrence_project_id`` and is attached to the
    image at ``image_url``; the note may belong to another project.
    """
    request = grafeas_v1.CreateOccurrenceRequest(
        parent=resource_names.project_path(occurrence_project_id),
        occurrence=grafeas_v1.Occurrence(
            note_name=resource_names.note_path(note_project_id, note_id),
            resource_uri=image_url,
            # Details of this particular vulnerability instance go here
            vulnerability=grafeas_v1.VulnerabilityOccurrence(),
        ),
    )
    return client.create_occurrence(request=request)


@sample_operation()
def update_occurrence(
    client: GrafeasClientPort,
    updated: Any,
    occurrence_name: str,
    update_mask: Sequence[str] | None = None,
) -> Any:
    """Push an update to an occurrence that already exists on the server.

    ``occurrence_name`` has the form ``projects/[PROJECT_ID]/occurrences/[OCCURRENCE_ID]``.
    """
    request = grafeas_v1.UpdateOccurrenceRequest(
        name=occurrence_name,
        occurrence=updated,
    )
    mask = _field_mask(update_mask)
    if mask is not None:
        request.update_mask = mask
    return client.update_occurrence(request=request)


@audit_trail("delete_occurrence", resource_param="occurrence_name")
@sample_operation()
def delete_occurrence(client: GrafeasClientPort, occurrence_name: str) -> None:
    """Remove an existing occurrence from the server."""
    request = grafeas_v1.DeleteOccurrenceRequest(name=occurrence_name)
    client.delete_occurrence(request=request)


@sample_operation()
def get_occurrence(
    client: GrafeasClientPort,
    occurrence_name: str,
    out: TextIO | None = None,
) -> Any:
    """Retrieve, print and return an occurrence."""
    request = grafeas_v1.GetOccurrenceRequest(name=occurrence_name)
    occurrence = client.get_occurrence(request=request)
    print(occurrence, file=out)
    return occurrence


# ==============================================================================
# Listings
# ==============================================================================


@sample_operation(log_level=logging.INFO)
def get_discovery_info(
    client: GrafeasClientPort,
    image_url: str,
    project_id: str,
    out: TextIO | None = None,
) -> int:
    """Print the discovery occurrence(s) created for an image.

    The discovery occurrence holds the state of the initial scan of the image.

    Returns:
        Number of occurrences printed
    """
    parent = resource_names.project_path(project_id)
    list_filter = resource_names.discovery_filter(image_url)
    request = grafeas_v1.ListOccurrencesRequest(parent=parent, filter=list_filter)
    pager = client.list_occurrences(request=request)
    return _print_each(pager, out, resource=parent, list_filter=list_filter)


@sample_operation(log_level=logging.INFO)
def get_occurrences_for_note(
    client: GrafeasClientPort,
    note_id: str,
    project_id: str,
    out: TextIO | None = None,
) -> int:
    """Print and count every occurrence attached to a note."""
    name = resource_names.note_path(project_id, note_id)
    request = grafeas_v1.ListNoteOccurrencesRequest(name=name)
    pager = client.list_note_occurrences(request=request)
    return _print_each(pager, out, resource=name)


@sample_operation(log_level=logging.INFO)
def get_occurrences_for_image(
    client: GrafeasClientPort,
    image_url: str,
    project_id: str,
    out: TextIO | None = None,
) -> int:
    """Print and count every occurrence attached to an image."""
    parent = resource_names.project_path(project_id)
    list_filter = resource_names.resource_url_filter(image_url)
    request = grafeas_v1.ListOccurrencesRequest(parent=parent, filter=list_filter)
    pager = client.list_occurrences(request=request)
    return _print_each(pager, out, resource=parent, list_filter=list_filter)
