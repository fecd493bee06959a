"""ticketbridge command line entry point."""
import typer

from ticketbridge.logging import configure_logging
from ticketbridge.server.cli import server_app


app = typer.Typer(help="ticketbridge: create and list Jira tickets over HTTP")
app.add_typer(server_app, name="server")


@app.callback()
def main_callback() -> None:
    """
    ticketbridge: create and list Jira tickets over HTTP.
    """
    configure_logging()
