"""
``payflow run`` and ``payflow scenarios``.

Configuration comes from the environment (see ``payflow.core.environment``);
command-line options override it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from payflow.core.environment import RunConfig
from payflow.core.errors import ConfigurationError, PayflowError
from payflow.testing.connectors.registry import ConnectorConfigRegistry
from payflow.testing.report import format_report, write_report
from payflow.testing.runner import WorkflowRunner
from payflow.testing.workflows import CATALOGUE, workflows_for

console = Console()


def run_command(
    connector: list[str] = typer.Option(
        None, "--connector", "-c", help="Connector to test against its sandbox (repeatable)"
    ),
    alpha_connector: list[str] = typer.Option(
        None, "--alpha-connector", "-a", help="Connector to test against its mock (repeatable)"
    ),
    scenario: list[str] = typer.Option(
        None, "--scenario", "-s", help="Only run these scenarios (repeatable)"
    ),
    workflow: list[str] = typer.Option(
        None, "--workflow", "-w", help="Only run these workflows (repeatable)"
    ),
    base_url: str | None = typer.Option(None, "--base-url", help="Payment server base URL"),
    workers: int | None = typer.Option(None, "--workers", "-j", help="Concurrent workflows"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write report to file"),
    format: str = typer.Option("json", "--format", "-f", help="Report file format: json or yaml"),
    strict: bool = typer.Option(
        False, "--strict", help="Exit non-zero on assertion failures too"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show passing assertions"),
) -> None:
    """
    Run payment workflows for every configured connector and scenario.

    Examples:
        payflow run -c stripe                       # Sandbox connector
        payflow run -a silverflow                   # Mocked alpha connector
        payflow run -c bluesnap -s No3DS -w refund  # One combination
        payflow run -o report.yaml -f yaml          # Save structured report
    """
    if format not in ("json", "yaml"):
        typer.echo(f"Unsupported format: {format} (use json or yaml)", err=True)
        raise typer.Exit(code=2)

    overrides: dict[str, Any] = {}
    if connector:
        overrides["connectors"] = list(connector)
    if alpha_connector:
        overrides["alpha_connectors"] = list(alpha_connector)
    if base_url:
        overrides["base_url"] = base_url
    if workers is not None:
        overrides["workers"] = workers

    try:
        config = RunConfig.from_env().model_copy(update=overrides)
        config.check()
        runner = WorkflowRunner(config)
        report = runner.run(scenarios=scenario or None, workflows=workflow or None)
    except PayflowError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(format_report(report, verbose=verbose))
    if output:
        write_report(report, output, format)
        typer.echo(f"Report saved to {output}")

    summary = report.get_summary()
    code = report.exit_code(strict=strict)
    if report.infrastructure_failed:
        console.print("[red]Run failed: infrastructure errors (see above)[/red]")
    elif summary["passed"] == summary["total"]:
        console.print(f"[green]All {summary['total']} combination(s) passed[/green]")
    else:
        console.print(
            f"[yellow]{summary['passed']}/{summary['total']} passed, "
            f"{summary['failed']} failed, {summary['aborted']} aborted[/yellow]"
        )
    if code:
        raise typer.Exit(code=code)


def scenarios_command(
    connector: str | None = typer.Argument(None, help="Connector to show (default: all)"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List connector scenarios and the workflows each one drives."""
    registry = ConnectorConfigRegistry.default()
    connectors = [connector] if connector else registry.connectors()

    if as_json:
        try:
            data = [
                {
                    "connector": name,
                    "scenario": scenario.name,
                    "currency": scenario.currency,
                    "successful_states": scenario.successful_states,
                    "successful_sync_states": scenario.successful_sync_states,
                    "mandate": scenario.mandate_type.kind if scenario.mandate_type else None,
                    "workflows": workflows_for(scenario),
                }
                for name in connectors
                for scenario in (registry.lookup(name, s) for s in registry.scenarios_for(name))
            ]
        except ConfigurationError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        console.print_json(json.dumps(data))
        return

    try:
        for name in connectors:
            typer.echo(f"{name}:")
            for scenario_name in registry.scenarios_for(name):
                scenario = registry.lookup(name, scenario_name)
                workflows = ", ".join(workflows_for(scenario)) or "(none)"
                typer.echo(
                    f"  • {scenario_name} [{scenario.currency}] "
                    f"{scenario.successful_states} → {scenario.successful_sync_states}: "
                    f"{workflows}"
                )
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if connector is None:
        typer.echo("")
        typer.echo("Workflows:")
        for definition in CATALOGUE.values():
            typer.echo(f"  • {definition.name}: {definition.description}")
