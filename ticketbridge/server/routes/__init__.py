"""API route modules."""
from ticketbridge.server.routes.health import router as health_router
from ticketbridge.server.routes.tickets import router as tickets_router


__all__ = ["health_router", "tickets_router"]
