"""Ticket translation services."""
from ticketbridge.services.identity import resolve_reporter
from ticketbridge.services.priority import resolve_priority
from ticketbridge.services.tickets import TicketService


__all__ = ["TicketService", "resolve_priority", "resolve_reporter"]
