"""Request and response models for the HTTP API."""
from ticketbridge.server.models.responses import ErrorResponse


__all__ = ["ErrorResponse"]
