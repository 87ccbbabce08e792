"""Version information for gcp-samples."""

from importlib import metadata


def get_version() -> str:
    """Get the installed package version.

    Returns:
        str: Version string from package metadata, or fallback value
    """
    try:
        return metadata.version("gcp-samples")
    except metadata.PackageNotFoundError:
        # Source checkout without an install
        return "0.1.0-dev"
