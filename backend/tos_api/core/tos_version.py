"""ToS Version — the current Terms-of-Service version descriptor.

Invariants:
    - CURRENT_TOS_VERSION is constant for the lifetime of the process
    - Dates are ISO-8601 calendar dates (YYYY-MM-DD)

Design Decisions:
    - Hardcoded constant, not read from the data directory: the version is
      released together with the code that serves it
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class VersionInfo:
    """Immutable ToS version record."""
    version: str
    effective_date: str
    last_updated: str


CURRENT_TOS_VERSION = VersionInfo(
    version="2.1.0",
    effective_date="2025-01-15",
    last_updated="2025-01-10",
)
