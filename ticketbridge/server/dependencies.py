# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""FastAPI dependency injection providers."""

from __future__ import annotations

from ticketbridge.services.tickets import TicketService


# Module-level ticket service instance
_ticket_service: TicketService | None = None


def set_ticket_service(service: TicketService) -> None:
    """Set the global ticket service instance.

    This should be called during application startup.

    Args:
        service: TicketService instance to set.
    """
    global _ticket_service
    _ticket_service = service


def clear_ticket_service() -> None:
    """Clear the global ticket service instance.

    This should be called during application shutdown.
    """
    global _ticket_service
    _ticket_service = None


def get_ticket_service() -> TicketService:
    """Get the ticket service instance.

    Returns:
        The current TicketService instance.

    Raises:
        RuntimeError: If the service is not initialized.
    """
    if _ticket_service is None:
        raise RuntimeError("Ticket service not initialized. Is the server running?")
    return _ticket_service
