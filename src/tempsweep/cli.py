"""CLI interface for Tempsweep."""

from __future__ import annotations

import logging
import time

import click

from tempsweep.config import SweepConfig, load_config
from tempsweep.core.confirmation import ConfirmationGate
from tempsweep.core.engine import SweepEngine
from tempsweep.models.scan_result import RunSummary, ScanReportLine
from tempsweep.utils import format_elapsed, format_size


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _build_config() -> SweepConfig:
    return load_config()


def _print_line(line: ScanReportLine) -> None:
    where = f"{line.description} in '{line.path}'"
    if line.is_empty:
        click.echo(f"  {click.style('·', fg='bright_black')} {where}: nothing to clean.")
    else:
        size = click.style(format_size(line.total_bytes), fg="green", bold=True)
        click.echo(f"  {click.style('✓', fg='green')} {where}: {line.file_count:,} files, {size}")


def _print_summary(summary: RunSummary) -> None:
    click.echo(f"\nFiles identified: {click.style(f'{summary.file_count:,}', bold=True)}")
    click.echo(f"Potential space to free: {click.style(format_size(summary.total_bytes), fg='green', bold=True)}\n")


def _prompt(summary: RunSummary) -> str:
    try:
        return click.prompt("Delete these files? [y/N]", default="n", show_default=False)
    except click.Abort:
        # End of input, e.g. a scheduled run without --unattended
        click.echo()
        return ""


@click.command()
@click.option(
    "--unattended",
    "-u",
    is_flag=True,
    help="Delete immediately without asking for confirmation.",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
def main(unattended: bool, verbose: int) -> None:
    """Tempsweep — remove stale temp, cache, log and crash dump files.

    Scans known locations for files older than the configured age and,
    after confirmation, deletes them. Directories are left in place.
    """
    _setup_logging(verbose)
    config = _build_config()
    if not config.has_sources:
        raise click.ClickException("Could not determine any locations to scan.")

    engine = SweepEngine(config)
    gate = ConfirmationGate(_prompt, unattended=unattended)

    click.echo(f"\n{click.style('🔍', bold=True)} Scanning...\n")
    start = time.monotonic()

    def on_summary(summary: RunSummary) -> None:
        _print_summary(summary)
        if unattended:
            click.echo(click.style("Unattended mode: deleting without confirmation.", fg="yellow"))

    summary, outcome = engine.run(gate, on_line=_print_line, on_summary=on_summary)

    if summary.is_empty:
        click.echo("\nNo files found to clean.")
        return

    if outcome is None:
        click.echo("Aborted. No files were deleted.")
        return

    click.echo(
        f"\n{click.style('🧹', bold=True)} Deleted {outcome.files_removed:,} files, "
        f"freeing {click.style(format_size(outcome.freed_bytes), fg='green', bold=True)}."
    )
    if outcome.failed:
        click.echo(click.style(f"  {outcome.failed:,} files could not be deleted.", fg="yellow"))
    click.echo(f"Finished in {format_elapsed(time.monotonic() - start)}.\n")
