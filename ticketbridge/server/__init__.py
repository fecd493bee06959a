"""ticketbridge FastAPI server package."""
from ticketbridge.server.config import ServerConfig


__all__ = ["ServerConfig"]
