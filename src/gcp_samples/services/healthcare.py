"""Cloud Healthcare API samples - dataset management."""

import logging
from typing import TextIO

from googleapiclient.errors import HttpError

from gcp_samples.core import resource_names
from gcp_samples.core.decorators import audit_trail, sample_operation
from gcp_samples.core.exceptions import DatasetDeletionError
from gcp_samples.ports.cloud_clients import HealthcareServicePort

logger = logging.getLogger(__name__)


@audit_trail("delete_dataset", resource_param="dataset_id")
@sample_operation(log_level=logging.INFO)
def delete_dataset(
    service: HealthcareServicePort,
    project_id: str,
    location: str,
    dataset_id: str,
    out: TextIO | None = None,
) -> None:
    """Delete a Healthcare dataset and report it on ``out``.

    Args:
        service: Healthcare API discovery resource
        project_id: Project owning the dataset
        location: Dataset region, e.g. ``us-central1``
        dataset_id: Dataset identifier
        out: Output sink, ``sys.stdout`` when None

    Raises:
        DatasetDeletionError: if the delete call fails
    """
    name = resource_names.dataset_path(project_id, location, dataset_id)
    datasets = service.projects().locations().datasets()

    try:
        datasets.delete(name=name).execute()
    except HttpError as e:
        logger.warning("Healthcare API rejected deletion of %s: %s", name, e)
        raise DatasetDeletionError(name, e) from e
    except Exception as e:
        logger.exception("Unexpected error deleting dataset %s", name)
        raise DatasetDeletionError(name, e) from e

    print(f"Deleted dataset: {resource_names.quote(name)}", file=out)
