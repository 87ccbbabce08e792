"""GCP Samples Test Suite.

- core/: configuration, logging, exceptions, decorators and resource names
- services/: sample operations against fake Google Cloud clients
- fakes/: in-memory client doubles shared by the tests
"""

from __future__ import annotations
