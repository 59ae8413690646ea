"""ToS Document Store — reads Terms-of-Service files from a sandboxed directory.

Invariants:
    - Only regular files that canonically resolve strictly inside base_dir are served
    - Escaping paths and missing files raise the same ResourceNotFoundError (no existence leak)
    - Content is returned exactly as stored: UTF-8, no newline translation
    - Never writes to the filesystem

Design Decisions:
    - base_dir passed to the constructor, not read from settings here, so tests
      can point a store at tmp_path (ADR: explicit configuration)
    - Canonicalize with Path.resolve() then check containment: symlinks that
      leave the sandbox are rejected the same way as "../" segments
"""

import logging
from pathlib import Path

from tos_api.core.errors import (
    DocumentUnreadableError, ErrorContext, ResourceNotFoundError,
)
from tos_api.core.path_containment import is_contained, join_requested

logger = logging.getLogger(__name__)


class TosDocumentStore:
    """Read-only access to the ToS files under a single base directory."""

    def __init__(self, base_dir: str | Path):
        self._base_dir = Path(base_dir).resolve()

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def resolve(self, file: str) -> Path:
        """Map a client-supplied name to a contained regular file.

        Raises:
            ResourceNotFoundError: if the file is absent, not a regular file,
                or resolves outside base_dir.
        """
        try:
            candidate = Path(join_requested(self._base_dir, file)).resolve()
        except (OSError, ValueError, RuntimeError):
            # NUL bytes, symlink loops, over-long names
            raise _not_found(file) from None

        if not is_contained(self._base_dir, candidate):
            logger.debug(
                "Rejected path outside ToS data directory",
                extra={"requested_file": file},
            )
            raise _not_found(file)

        try:
            is_regular = candidate.is_file()
        except OSError:
            # ENAMETOOLONG, EACCES on an intermediate directory
            raise _not_found(file) from None
        if not is_regular:
            raise _not_found(file)
        return candidate

    def read_document(self, file: str) -> str:
        """Return the full text of a ToS file.

        Raises:
            ResourceNotFoundError: see resolve().
            DocumentUnreadableError: the file exists but cannot be read as UTF-8.
        """
        path = self.resolve(file)
        try:
            with open(path, encoding="utf-8", newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentUnreadableError(file, str(e)) from e

        logger.debug("Served ToS document", extra={"requested_file": file})
        return content


def _not_found(file: str) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        "File", file, ErrorContext(requested_file=file),
    )
