"""Typer CLI application."""

from pathlib import Path
from typing import Optional

import typer

from spaceline.config.settings import get_settings
from spaceline.config.logging import LogLevel, setup_logging, get_logger
from spaceline.generation.errors import InvalidArgumentError
from spaceline.generation.error_logging import log_error
from spaceline.generation.random_source import NumpyRandomSource
from spaceline.generation.table import generate_table
from spaceline.ir.ticket import GenerationParams
from spaceline.render.text import render_table
from spaceline.render.writer import write_csv, write_text

app = typer.Typer(help="Spaceline: random ticket price tables for trips to Mars")


@app.command()
def tickets(
    rows: Optional[int] = typer.Option(
        None, "--rows", "-n", help="Number of tickets (default from settings, 10)"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed for reproducible tables"
    ),
    csv: Optional[Path] = typer.Option(
        None, "--csv", help="Also write the tickets to this CSV file"
    ),
    log_level: Optional[LogLevel] = typer.Option(
        None, "--log-level", case_sensitive=False, help="Logging level"
    ),
):
    """
    Generate a ticket table and print it to stdout.

    Args:
        rows: Number of rows to generate
        seed: Random seed
        csv: Optional CSV output path
        log_level: Logging level override
    """
    setup_logging(level=log_level)
    logger = get_logger(__name__)
    settings = get_settings()

    params = GenerationParams(row_count=settings.row_count)
    if seed is None:
        seed = settings.seed

    try:
        table = generate_table(rows, NumpyRandomSource(seed), params)
    except InvalidArgumentError as e:
        # A bad count is a usage mistake: the echoed message is all the user sees
        log_error(
            e,
            context={'row_count': params.row_count if rows is None else rows, 'seed': seed},
            operation="ticket generation",
            log_level="debug",
            with_traceback=False,
        )
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    write_text(render_table(table))

    if csv is not None:
        write_csv(table, csv)
        logger.info(f"CSV written to {csv}")


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
