"""Path Containment — decides whether a canonical path stays inside a sandbox.

Invariants:
    - Operates on already-resolved absolute paths only (no filesystem access)
    - The base directory itself is never a valid document
    - Lexical prefix tricks ("/data-evil" vs "/data") are rejected: comparison is
      per path component, not per character
"""

from pathlib import PurePath


def is_contained(base_dir: PurePath, candidate: PurePath) -> bool:
    """True if candidate is a strict descendant of base_dir."""
    if not base_dir.is_absolute() or not candidate.is_absolute():
        return False
    if candidate == base_dir:
        return False
    return candidate.is_relative_to(base_dir)


def join_requested(base_dir: PurePath, requested: str) -> PurePath:
    """Join a client-supplied name onto the base directory.

    An absolute `requested` replaces the base entirely (pathlib semantics), so
    the containment check must always run on the result.
    """
    return base_dir / requested
