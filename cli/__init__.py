"""complexity-roi CLI: Typer app and entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from cli.analysis import chart, export, summary, table
from cli.display import console
from cli.session import DatasetSession
from complexity_roi import __version__

app = typer.Typer(
    name="complexity-roi",
    help="Code complexity ROI analysis. Classify files and prioritise refactoring.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"complexity-roi {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        envvar="COMPLEXITY_ROI_SEED",
        help="Seed for a reproducible synthetic dataset.",
    ),
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        envvar="COMPLEXITY_ROI_INPUT",
        help="Load records from a CSV file instead of generating them.",
    ),
    delay: float = typer.Option(
        1.2,
        "--delay",
        envvar="COMPLEXITY_ROI_DELAY",
        min=0.0,
        help="Seconds of simulated loading before results are shown.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show CLI version and exit.",
    ),
) -> None:
    """Global options applied before any sub-command."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )
    ctx.obj = DatasetSession(seed=seed, input_path=input_path, delay=delay)


# Register commands
app.command()(summary)
app.command()(table)
app.command()(chart)
app.command()(export)


if __name__ == "__main__":
    app()
