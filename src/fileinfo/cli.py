"""Command line interface for fileinfo."""

from __future__ import annotations

import logging
from typing import List, Optional

import typer

from fileinfo.config import AppConfig
from fileinfo.errors import FileInfoError, UsageError
from fileinfo.models import ColumnSet
from fileinfo.render.table import MetadataFormatter
from fileinfo.reporting import Reporter
from fileinfo.utils.files import collect_records

app = typer.Typer(
    help="fileinfo - show size, inode, modification time and permissions of files",
    add_completion=False,
)


def _setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _print_usage(ctx: typer.Context, reporter: Reporter) -> None:
    reporter.info(ctx.get_usage())
    reporter.info("Example:")
    reporter.info(f"{ctx.command_path} /mnt")


def list_info(paths: List[str], config: AppConfig, reporter: Reporter) -> None:
    """Print the file info table and the permissions table for ``paths``."""
    records = collect_records(paths, reporter=reporter)
    formatter = MetadataFormatter.from_config(config, reporter=reporter)
    sink = reporter.out.file

    formatter.write(records, sink, ColumnSet.FILE_INFO)
    sink.write("\n")
    formatter.write(records, sink, ColumnSet.PERMISSIONS)
    reporter.verbose(f"Listed {len(records)} path(s).")


@app.command()
def main(
    ctx: typer.Context,
    paths: Optional[List[str]] = typer.Argument(
        None, help="Files or directories to inspect.", show_default=False
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Explain every column of the output"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Print debug tracing"),
) -> None:
    """Show metadata and permission bits of one or more paths."""
    config = AppConfig(verbose=verbose, debug=debug)
    _setup_logging(config.debug)
    reporter = Reporter(config)
    reporter.debug(f"Arguments received from CLI: [{' '.join(paths or [])}]")

    try:
        if not paths:
            _print_usage(ctx, reporter)
            raise UsageError("Please specify at least one path to a file")
        list_info(paths, config, reporter)
    except FileInfoError as exc:
        reporter.error(str(exc))
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
