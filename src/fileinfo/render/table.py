"""Aligned tabular output for path metadata."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, List, Sequence, TextIO, Tuple

from rich.cells import cell_len

from fileinfo.config import DEFAULT_TIME_FORMAT, AppConfig
from fileinfo.models import ColumnSet, PathRecord
from fileinfo.render.columns import TABLE_SPECS
from fileinfo.render.explain import explain
from fileinfo.utils.permissions import binary, octal, symbolic

if TYPE_CHECKING:
    from fileinfo.reporting import Reporter


class TableWriter:
    """Buffers rows and writes them with left-aligned columns on flush.

    Each row is a list of cells followed by an optional trailer. Cells are
    padded to the widest cell of their column plus ``padding`` spaces; the
    trailer is written as-is and does not widen any column.
    """

    def __init__(self, sink: TextIO, *, padding: int = 3, min_width: int = 1) -> None:
        self.sink = sink
        self.padding = padding
        self.min_width = min_width
        self._rows: List[Tuple[Tuple[str, ...], str]] = []

    def add_row(self, cells: Sequence[str], trailer: str = "") -> None:
        self._rows.append((tuple(cells), trailer))

    def flush(self) -> None:
        widths = self._column_widths()
        for cells, trailer in self._rows:
            parts = []
            for index, cell in enumerate(cells):
                if index == len(cells) - 1 and not trailer:
                    parts.append(cell)
                else:
                    parts.append(cell + " " * (widths[index] - cell_len(cell)))
            parts.append(trailer)
            self.sink.write("".join(parts) + "\n")
        self._rows.clear()

    def _column_widths(self) -> List[int]:
        widths: List[int] = []
        for cells, _ in self._rows:
            for index, cell in enumerate(cells):
                width = max(cell_len(cell) + self.padding, self.min_width)
                if index == len(widths):
                    widths.append(width)
                else:
                    widths[index] = max(widths[index], width)
        return widths


def row_values(
    record: PathRecord, column_set: ColumnSet, time_format: str = DEFAULT_TIME_FORMAT
) -> List[str]:
    """Return the cell texts for one record."""
    if column_set is ColumnSet.FILE_INFO:
        return [
            record.path,
            str(record.size),
            str(record.inode),
            record.modified_at.strftime(time_format),
        ]
    return [
        record.path,
        symbolic(record.mode),
        binary(record.permission_bits),
        octal(record.permission_bits),
    ]


class MetadataFormatter:
    """Renders path records as a FILE_INFO or PERMISSIONS table."""

    def __init__(
        self,
        *,
        padding: int = 3,
        time_format: str = DEFAULT_TIME_FORMAT,
        explain: bool = False,
        reporter: Reporter | None = None,
    ) -> None:
        self.padding = padding
        self.time_format = time_format
        self.explain = explain
        self.reporter = reporter

    @classmethod
    def from_config(cls, config: AppConfig, reporter: Reporter | None = None) -> "MetadataFormatter":
        return cls(
            padding=config.padding,
            time_format=config.time_format,
            explain=config.verbose,
            reporter=reporter,
        )

    def write(self, records: Sequence[PathRecord], sink: TextIO, column_set: ColumnSet) -> None:
        """Write the header, one row per record and, if enabled, the explanation."""
        spec = TABLE_SPECS[column_set]
        writer = TableWriter(sink, padding=self.padding)
        writer.add_row(spec.headers[:-1], spec.headers[-1])

        for record in records:
            if self.reporter is not None:
                label = "file info" if column_set is ColumnSet.FILE_INFO else "permission"
                self.reporter.debug(f"Listing {label} of: {record.path}")
            values = row_values(record, column_set, self.time_format)
            writer.add_row(values[:-1], values[-1])

        if self.explain:
            explain(writer, spec.captions, spec.explanation, reporter=self.reporter)
        else:
            writer.flush()

    def render(self, records: Sequence[PathRecord], column_set: ColumnSet) -> str:
        buffer = io.StringIO()
        self.write(records, buffer, column_set)
        return buffer.getvalue()
