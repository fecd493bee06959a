"""CLI commands for the ticketbridge server."""
from typing import Annotated

import typer
import uvicorn
from rich.console import Console

from ticketbridge.server.config import ServerConfig


console = Console()

server_app = typer.Typer(
    name="server",
    help="ticketbridge API server commands.",
)


@server_app.callback(invoke_without_command=True)
def server(
    ctx: typer.Context,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port to listen on (default: from config/env)"),
    ] = None,
    bind_all: Annotated[
        bool,
        typer.Option(
            "--bind-all",
            help="Bind to all interfaces (0.0.0.0). WARNING: Exposes server to network.",
        ),
    ] = False,
    reload: Annotated[
        bool,
        typer.Option("--reload", help="Enable auto-reload for development"),
    ] = False,
) -> None:
    """Start the ticketbridge API server.

    By default, binds to localhost (127.0.0.1) only.
    Use --bind-all to expose to the network. Callers are not authenticated.

    Port and host can be configured via TICKETBRIDGE_PORT and TICKETBRIDGE_HOST env vars.
    """
    if ctx.invoked_subcommand is not None:
        return

    config = ServerConfig()

    # CLI flags override config
    effective_port = port if port is not None else config.port
    effective_host = "0.0.0.0" if bind_all else config.host

    if bind_all:
        console.print(
            "[yellow]Warning:[/yellow] Server accessible to all network clients. "
            "No authentication enabled.",
            style="bold yellow",
        )

    console.print(f"Starting ticketbridge server on http://{effective_host}:{effective_port}")
    console.print(f"API docs: http://{effective_host}:{effective_port}/docs")

    try:
        uvicorn.run(
            "ticketbridge.server.main:app",
            host=effective_host,
            port=effective_port,
            reload=reload,
            log_level=config.log_level.lower(),
        )
    except KeyboardInterrupt:
        console.print("\nServer stopped.")
