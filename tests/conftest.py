"""Shared fixtures."""

from __future__ import annotations

import io
from datetime import datetime

import pytest
from rich.console import Console

from fileinfo.config import AppConfig
from fileinfo.models import PathRecord
from fileinfo.reporting import Reporter


@pytest.fixture
def make_record():
    def _make(
        path: str = "/tmp/a",
        size: int = 42,
        inode: int = 1234,
        modified_at: datetime = datetime(2024, 3, 5, 14, 7, 9),
        mode: int = 0o100644,
    ) -> PathRecord:
        return PathRecord(path=path, size=size, inode=inode, modified_at=modified_at, mode=mode)

    return _make


@pytest.fixture
def make_reporter():
    """Build a Reporter whose consoles write into StringIO buffers."""

    def _make(verbose: bool = False, debug: bool = False) -> Reporter:
        out = Console(file=io.StringIO(), markup=False, emoji=False, highlight=False, soft_wrap=True)
        err = Console(file=io.StringIO(), markup=False, emoji=False, highlight=False, soft_wrap=True)
        return Reporter(AppConfig(verbose=verbose, debug=debug), out=out, err=err)

    return _make
