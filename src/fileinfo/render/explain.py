"""Staircase annotation that maps table columns to captions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from fileinfo.render.table import TableWriter
    from fileinfo.reporting import Reporter

BAR = "|"
CORNER = "└>"


def explain(
    writer: TableWriter,
    captions: Sequence[str],
    text: str,
    reporter: Reporter | None = None,
) -> None:
    """Append the staircase for ``captions`` to ``writer``, flush it, then print ``text``.

    The staircase has one level per caption. The deepest level is drawn
    first and carries the last caption, so every caption lands beneath its
    own column:

        Path   Size
        |      |
        |      └> caption for Size
        |
        └> caption for Path
    """
    if reporter is not None:
        reporter.debug(f"Explaining: [{' '.join(captions)}]")

    for level in range(len(captions), 0, -1):
        writer.add_row([BAR] * level)
        writer.add_row([BAR] * (level - 1), f"{CORNER} {captions[level - 1]}")
    writer.flush()

    if text:
        writer.sink.write("\n" + text.strip("\n") + "\n")
