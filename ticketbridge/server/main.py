"""FastAPI application setup and configuration."""
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ticketbridge import __version__
from ticketbridge.config import load_jira_settings
from ticketbridge.logging import configure_logging, log_server_startup
from ticketbridge.server.config import ServerConfig
from ticketbridge.server.dependencies import clear_ticket_service, set_ticket_service
from ticketbridge.server.routes import health_router, tickets_router
from ticketbridge.server.routes.tickets import configure_exception_handlers
from ticketbridge.services.tickets import TicketService
from ticketbridge.trackers.jira import JiraClient, JiraCredentials


# Module-level config storage for DI
_config: ServerConfig | None = None


def get_config() -> ServerConfig:
    """FastAPI dependency that provides the server configuration.

    Returns:
        The current ServerConfig instance.

    Raises:
        RuntimeError: If config is not initialized (server not started).
    """
    if _config is None:
        raise RuntimeError("Server config not initialized. Is the server running?")
    return _config


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan events.

    Loads configuration, encodes the Jira credentials once, and opens the
    shared Jira client. The client is closed on shutdown.

    Raises:
        ConfigurationError: If required Jira settings are missing.
    """
    global _config

    _config = ServerConfig()
    configure_logging(_config.log_level)

    jira_settings = load_jira_settings()
    credentials = JiraCredentials.from_settings(jira_settings)
    client = JiraClient(credentials, timeout=_config.request_timeout_seconds)
    set_ticket_service(TicketService(client, jira_settings))

    log_server_startup(
        host=_config.host,
        port=_config.port,
        jira_url=credentials.base_url,
        version=__version__,
    )

    app.state.start_time = datetime.now(UTC)
    try:
        yield
    finally:
        clear_ticket_service()
        await client.aclose()
        _config = None


def create_app(config: ServerConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Server configuration; read from the environment when omitted.

    Returns:
        Configured FastAPI application instance.
    """
    config = config or ServerConfig()

    application = FastAPI(
        title="ticketbridge API",
        description="Creates and lists Jira tickets from simplified requests",
        version=__version__,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    configure_exception_handlers(application)

    application.include_router(health_router)
    application.include_router(tickets_router)

    return application


# Create app instance
app = create_app()
