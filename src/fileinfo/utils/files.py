"""Utility helpers for querying filesystem metadata."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, List, Sequence

from fileinfo.errors import MetadataQueryError, MissingPathsError
from fileinfo.models import PathRecord

if TYPE_CHECKING:
    from fileinfo.reporting import Reporter

LOGGER = logging.getLogger(__name__)


def find_missing_paths(paths: Iterable[str]) -> List[str]:
    """Return every path that does not exist, in input order."""
    missing = []
    for path in paths:
        try:
            Path(path).stat()
        except FileNotFoundError:
            missing.append(path)
        except OSError as exc:
            # Exists but cannot be inspected; the metadata query reports it.
            LOGGER.debug("stat(%s) failed during existence check: %s", path, exc)
    return missing


def query_metadata(path: str) -> PathRecord:
    """Stat a single path, following symlinks."""
    try:
        info = Path(path).stat()
    except OSError as exc:
        raise MetadataQueryError(path, exc) from exc

    LOGGER.debug("stat(%s): size=%d ino=%d mode=%o", path, info.st_size, info.st_ino, info.st_mode)
    return PathRecord(
        path=path,
        size=info.st_size,
        inode=info.st_ino,
        modified_at=datetime.fromtimestamp(info.st_mtime),
        mode=info.st_mode,
    )


def collect_records(paths: Sequence[str], reporter: Reporter | None = None) -> List[PathRecord]:
    """Validate that all paths exist, then query each one in order.

    All missing paths are reported together before any metadata query runs.
    The first failing query aborts the whole batch.
    """
    if reporter is not None:
        reporter.debug(f"Listing info of paths: [{' '.join(paths)}]")

    missing = find_missing_paths(paths)
    if missing:
        if reporter is not None:
            for path in missing:
                reporter.debug(f"{path} does not exist!")
        raise MissingPathsError(missing)

    records = []
    for path in paths:
        if reporter is not None:
            reporter.debug(f"Querying metadata of: {path}")
        records.append(query_metadata(path))
    return records
