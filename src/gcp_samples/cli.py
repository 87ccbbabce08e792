"""GCP Samples CLI Tool.

Command-line entry point running one sample operation per command.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
import functools
import logging
from typing import Any, TypeVar, cast

import click
from google.api_core.exceptions import GoogleAPICallError
from google.auth.exceptions import GoogleAuthError
from rich.console import Console

from gcp_samples.core.config import Settings, get_settings
from gcp_samples.core.exceptions import SamplesBaseError
from gcp_samples.core.logging_config import setup_logging
from gcp_samples.services import clients, container_analysis, healthcare, pubsub
from gcp_samples.services.gcp_credentials import GCPCredentialsManager
from gcp_samples.version import get_version

F = TypeVar("F", bound=Callable[..., Any])

# Status lines go to stderr, sample output to stdout
console = Console(stderr=True)

logger = logging.getLogger(__name__)


@dataclass
class SampleContext:
    """Per-invocation state shared by the commands."""

    settings: Settings
    project_override: str | None = None
    credentials_manager: GCPCredentialsManager = field(init=False)

    def __post_init__(self) -> None:
        self.credentials_manager = GCPCredentialsManager(self.settings)

    @property
    def project_id(self) -> str:
        return self.settings.require_project_id(self.project_override)

    def grafeas_client(self) -> Any:
        return clients.create_grafeas_client(self.credentials_manager.get_credentials())

    def subscriber_client(self) -> Any:
        return clients.create_subscriber_client(
            self.credentials_manager.get_credentials()
        )

    def healthcare_service(self) -> Any:
        return clients.create_healthcare_service(
            self.credentials_manager.get_credentials(),
            api_version=self.settings.healthcare_api_version,
        )


def handle_errors(func: F) -> F:
    """Report sample and Google API failures as click errors."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (SamplesBaseError, GoogleAPICallError, GoogleAuthError) as e:
            logger.debug("Command failed", exc_info=True)
            raise click.ClickException(str(e)) from e

    return cast("F", wrapper)


pass_sample_context = click.make_pass_decorator(SampleContext)


@click.group()
@click.option(
    "--project",
    "project_id",
    default=None,
    help="Google Cloud project ID (defaults to GOOGLE_CLOUD_PROJECT)",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(version=get_version(), prog_name="gcp-samples")
@click.pass_context
def cli(
    ctx: click.Context,
    project_id: str | None,
    verbose: bool,  # noqa: FBT001
) -> None:
    """Container Analysis, Pub/Sub and Healthcare API samples."""
    settings = get_settings()
    if verbose:
        settings = settings.model_copy(update={"debug": True, "log_level": "DEBUG"})

    setup_logging(settings)
    ctx.obj = SampleContext(settings=settings, project_override=project_id)


# ==============================================================================
# Notes
# ==============================================================================


@cli.command("create-note")
@click.argument("note_id")
@pass_sample_context
@handle_errors
def create_note_command(ctx: SampleContext, note_id: str) -> None:
    """Create a vulnerability note."""
    project_id = ctx.project_id
    note = container_analysis.create_note(ctx.grafeas_client(), note_id, project_id)
    console.print(f"[bold green]Created note[/bold green] {note_id}")
    click.echo(note)


@cli.command("update-note")
@click.argument("note_id")
@click.option("--short-description", default=None, help="New one-line description")
@click.option("--long-description", default=None, help="New detailed description")
@pass_sample_context
@handle_errors
def update_note_command(
    ctx: SampleContext,
    note_id: str,
    short_description: str | None,
    long_description: str | None,
) -> None:
    """Update the descriptions of an existing note."""
    changes = {
        name: value
        for name, value in (
            ("short_description", short_description),
            ("long_description", long_description),
        )
        if value is not None
    }
    if not changes:
        msg = "Nothing to update: pass --short-description and/or --long-description"
        raise click.UsageError(msg)

    project_id = ctx.project_id
    note = container_analysis.update_note(
        ctx.grafeas_client(),
        changes,
        note_id,
        project_id,
        update_mask=sorted(changes),
    )
    console.print(f"[bold green]Updated note[/bold green] {note_id}")
    click.echo(note)


@cli.command("delete-note")
@click.argument("note_id")
@pass_sample_context
@handle_errors
def delete_note_command(ctx: SampleContext, note_id: str) -> None:
    """Delete a note."""
    project_id = ctx.project_id
    container_analysis.delete_note(ctx.grafeas_client(), note_id, project_id)
    console.print(f"[bold green]Deleted note[/bold green] {note_id}")


@cli.command("get-note")
@click.argument("note_id")
@pass_sample_context
@handle_errors
def get_note_command(ctx: SampleContext, note_id: str) -> None:
    """Print a note."""
    project_id = ctx.project_id
    container_analysis.get_note(ctx.grafeas_client(), note_id, project_id)


# ==============================================================================
# Occurrences
# ==============================================================================


@cli.command("create-occurrence")
@click.argument("image_url")
@click.argument("note_id")
@click.option(
    "--note-project",
    default=None,
    help="Project owning the note (defaults to the occurrence project)",
)
@pass_sample_context
@handle_errors
def create_occurrence_command(
    ctx: SampleContext, image_url: str, note_id: str, note_project: str | None
) -> None:
    """Attach an occurrence of NOTE_ID to the image at IMAGE_URL."""
    project_id = ctx.project_id
    occurrence = container_analysis.create_occurrence(
        ctx.grafeas_client(),
        image_url,
        note_id,
        project_id,
        note_project or project_id,
    )
    console.print(f"[bold green]Created occurrence for[/bold green] {image_url}")
    click.echo(occurrence)


@cli.command("update-occurrence")
@click.argument("occurrence_name")
@click.option("--remediation", required=True, help="Remediation advice to record")
@pass_sample_context
@handle_errors
def update_occurrence_command(
    ctx: SampleContext, occurrence_name: str, remediation: str
) -> None:
    """Update the remediation of OCCURRENCE_NAME (projects/P/occurrences/O)."""
    occurrence = container_analysis.update_occurrence(
        ctx.grafeas_client(),
        {"remediation": remediation},
        occurrence_name,
        update_mask=["remediation"],
    )
    console.print(f"[bold green]Updated occurrence[/bold green] {occurrence_name}")
    click.echo(occurrence)


@cli.command("delete-occurrence")
@click.argument("occurrence_name")
@pass_sample_context
@handle_errors
def delete_occurrence_command(ctx: SampleContext, occurrence_name: str) -> None:
    """Delete OCCURRENCE_NAME (projects/P/occurrences/O)."""
    container_analysis.delete_occurrence(ctx.grafeas_client(), occurrence_name)
    console.print(f"[bold green]Deleted occurrence[/bold green] {occurrence_name}")


@cli.command("get-occurrence")
@click.argument("occurrence_name")
@pass_sample_context
@handle_errors
def get_occurrence_command(ctx: SampleContext, occurrence_name: str) -> None:
    """Print OCCURRENCE_NAME (projects/P/occurrences/O)."""
    container_analysis.get_occurrence(ctx.grafeas_client(), occurrence_name)


# ==============================================================================
# Listings
# ==============================================================================


@cli.command("discovery-info")
@click.argument("image_url")
@pass_sample_context
@handle_errors
def discovery_info_command(ctx: SampleContext, image_url: str) -> None:
    """Print the discovery occurrence of IMAGE_URL."""
    project_id = ctx.project_id
    container_analysis.get_discovery_info(ctx.grafeas_client(), image_url, project_id)


@cli.command("occurrences-for-note")
@click.argument("note_id")
@pass_sample_context
@handle_errors
def occurrences_for_note_command(ctx: SampleContext, note_id: str) -> None:
    """Print every occurrence of NOTE_ID."""
    project_id = ctx.project_id
    count = container_analysis.get_occurrences_for_note(
        ctx.grafeas_client(), note_id, project_id
    )
    console.print(f"[bold]{count}[/bold] occurrence(s) found")


@cli.command("occurrences-for-image")
@click.argument("image_url")
@pass_sample_context
@handle_errors
def occurrences_for_image_command(ctx: SampleContext, image_url: str) -> None:
    """Print every occurrence attached to IMAGE_URL."""
    project_id = ctx.project_id
    count = container_analysis.get_occurrences_for_image(
        ctx.grafeas_client(), image_url, project_id
    )
    console.print(f"[bold]{count}[/bold] occurrence(s) found")


# ==============================================================================
# Pub/Sub
# ==============================================================================


@cli.command("create-subscription")
@click.argument("subscription_id")
@pass_sample_context
@handle_errors
def create_subscription_command(ctx: SampleContext, subscription_id: str) -> None:
    """Create SUBSCRIPTION_ID on the occurrence topic."""
    project_id = ctx.project_id
    subscription = pubsub.create_occurrence_subscription(
        ctx.subscriber_client(), subscription_id, project_id
    )
    console.print(f"[bold green]Created subscription[/bold green] {subscription_id}")
    click.echo(subscription)


@cli.command("listen")
@click.argument("subscription_id")
@click.option(
    "--timeout",
    "timeout_seconds",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds to listen (defaults to PUBSUB_RECEIVE_TIMEOUT)",
)
@pass_sample_context
@handle_errors
def listen_command(
    ctx: SampleContext, subscription_id: str, timeout_seconds: float | None
) -> None:
    """Print occurrence events received on SUBSCRIPTION_ID."""
    timeout = timeout_seconds or ctx.settings.pubsub_receive_timeout
    project_id = ctx.project_id
    with console.status(f"[bold green]Listening on {subscription_id} for {timeout}s..."):
        pubsub.receive_occurrence_messages(
            ctx.subscriber_client(),
            subscription_id,
            project_id,
            timeout,
            max_pending=ctx.settings.pubsub_max_pending,
        )


# ==============================================================================
# Healthcare
# ==============================================================================


@cli.command("delete-dataset")
@click.argument("dataset_id")
@click.option(
    "--location",
    default=None,
    help="Dataset location (defaults to HEALTHCARE_LOCATION)",
)
@pass_sample_context
@handle_errors
def delete_dataset_command(
    ctx: SampleContext, dataset_id: str, location: str | None
) -> None:
    """Delete a Healthcare API dataset."""
    project_id = ctx.project_id
    healthcare.delete_dataset(
        ctx.healthcare_service(),
        project_id,
        location or ctx.settings.healthcare_location,
        dataset_id,
    )


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
