"""
CLI commands for mock connector servers.

``payflow mock serve`` is what ``MockServerManager`` spawns for each alpha
connector; it can also be run by hand while developing a connector.
"""

from __future__ import annotations

import typer

from payflow.core.environment import MOCK_SERVER_PORT
from payflow.core.errors import NoMockAvailable

mock_app = typer.Typer(help="Mock connector server management", no_args_is_help=True)


@mock_app.command(name="list")
def list_mocks() -> None:
    """List connectors that have a mock server."""
    from payflow.testing.vendor_mock.manager import MOCK_SERVERS

    typer.echo(f"{len(MOCK_SERVERS)} mock server(s):")
    for name, entry in sorted(MOCK_SERVERS.items()):
        typer.echo(f"  • {name}: {entry.description} ({entry.factory})")


@mock_app.command(name="serve")
def serve_mock(
    connector: str = typer.Argument(..., help="Connector name (e.g. silverflow)"),
    port: int = typer.Option(MOCK_SERVER_PORT, "--port", "-p", help="Port to listen on"),
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
) -> None:
    """Serve a connector's mock API until interrupted."""
    import uvicorn

    from payflow.testing.vendor_mock.manager import resolve

    try:
        entry = resolve(connector)
    except NoMockAvailable as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Serving {entry.name} mock on http://{host}:{port}")
    uvicorn.run(entry.load_app(), host=host, port=port, log_level="warning")
