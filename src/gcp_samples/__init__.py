"""GCP Samples - Container Analysis, Pub/Sub and Healthcare snippets.

Thin request/response wrappers around the Google Cloud client libraries for
vulnerability notes and occurrences, occurrence event subscriptions and
Healthcare dataset management.
"""

__version__ = "0.1.0"
__author__ = "GCP Samples Team"

__all__ = [
    "__author__",
    "__version__",
]
