"""
payflow CLI.

Commands:
    payflow run            Run workflows against the payment server
    payflow scenarios      List connector scenarios and the workflows they drive
    payflow mock list      List connectors that have a mock server
    payflow mock serve     Serve a connector's mock (used by the runner)
"""

from __future__ import annotations

import logging

import typer

from payflow import __version__
from payflow.cli.mock import mock_app
from payflow.cli.run import run_command, scenarios_command

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

app = typer.Typer(
    help="payflow - end-to-end payment workflow harness",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"payflow {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_level: str = typer.Option(
        "INFO", "--log-level", "-l", help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
) -> None:
    """payflow CLI main callback for global options."""
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        typer.echo(f"Unknown log level: {log_level}", err=True)
        raise typer.Exit(code=2)
    logging.basicConfig(level=level, format=LOG_FORMAT)


app.command(name="run")(run_command)
app.command(name="scenarios")(scenarios_command)
app.add_typer(mock_app, name="mock")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main", "mock_app"]
