"""Core fileinfo data models."""

from __future__ import annotations

import stat
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Tuple


class ColumnSet(str, Enum):
    """Which group of columns a table shows."""

    FILE_INFO = "file_info"
    PERMISSIONS = "permissions"


@dataclass(frozen=True, slots=True)
class PathRecord:
    """Metadata reported by the filesystem for a single path."""

    path: str
    size: int
    inode: int
    modified_at: datetime
    mode: int

    @property
    def permission_bits(self) -> int:
        """Owner/group/other rwx bits plus setuid, setgid and sticky."""
        return stat.S_IMODE(self.mode)


@dataclass(frozen=True, slots=True)
class TableSpec:
    """Column headers paired with their explanation captions.

    ``captions`` is either empty or holds exactly one caption per header, so
    the staircase drawn under a table always lines up with its columns.
    """

    headers: Tuple[str, ...]
    captions: Tuple[str, ...] = field(default=())
    explanation: str = ""

    def __post_init__(self) -> None:
        if not self.headers:
            raise ValueError("A table needs at least one column")
        if self.captions and len(self.captions) != len(self.headers):
            raise ValueError(
                f"Expected {len(self.headers)} captions, got {len(self.captions)}"
            )
