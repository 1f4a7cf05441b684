"""Error taxonomy for fileinfo.

Every error is terminal: the CLI prints the message prefixed with
``ERROR:`` and exits with status 1.
"""

from __future__ import annotations

from typing import Sequence


class FileInfoError(Exception):
    """Base class for errors reported to the user."""


class UsageError(FileInfoError):
    """The command line was incomplete."""


class MissingPathsError(FileInfoError):
    """One or more of the requested paths do not exist."""

    def __init__(self, paths: Sequence[str]) -> None:
        self.paths = list(paths)
        super().__init__(
            f"The following files did not exist: [{' '.join(self.paths)}]"
        )


class MetadataQueryError(FileInfoError):
    """The filesystem refused to report metadata for a path."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"stat {path}: {reason}")
