"""Leveled output for the command line tool."""

from __future__ import annotations

from rich.console import Console

from fileinfo.config import AppConfig


def _plain_console(*, stderr: bool = False) -> Console:
    # Paths are printed verbatim: no markup, emoji codes, highlighting or wrapping.
    return Console(stderr=stderr, markup=False, emoji=False, highlight=False, soft_wrap=True)


class Reporter:
    """Writes user-facing messages according to the verbose and debug modes.

    ``info`` always prints, ``verbose`` and ``debug`` only when the matching
    mode is enabled, and ``error`` goes to the error console with an
    ``ERROR:`` prefix. Debug lines share standard output with everything
    else.
    """

    def __init__(
        self,
        config: AppConfig,
        *,
        out: Console | None = None,
        err: Console | None = None,
    ) -> None:
        self.config = config
        self.out = out if out is not None else _plain_console()
        self.err = err if err is not None else _plain_console(stderr=True)

    def info(self, message: str) -> None:
        self.out.print(message)

    def verbose(self, message: str) -> None:
        if self.config.verbose:
            self.out.print(message)

    def debug(self, message: str) -> None:
        if self.config.debug:
            self.out.print(message)

    def error(self, message: str) -> None:
        self.err.print(f"ERROR: {message}")
