"""Atlassian Document Format rendering for ticket descriptions."""

from typing import Any

from ticketbridge.core.types import TicketRequest


def _text(value: str) -> dict[str, Any]:
    return {"type": "text", "text": value}


def build_description(ticket: TicketRequest) -> dict[str, Any]:
    """Render a ticket as a single ADF paragraph of labeled lines.

    Lines are separated by hardBreak nodes so they display one per line.

    Args:
        ticket: Validated ticket request.

    Returns:
        ADF ``doc`` node (version 1).
    """
    lines = [
        f"Summary: {ticket.summary}",
        f"Priority: {ticket.priority}",
        f"Link: {ticket.link}",
        f"Collection: {ticket.collection}",
        f"Reported by: {ticket.user.username}",
    ]

    content: list[dict[str, Any]] = []
    for i, line in enumerate(lines):
        if i:
            content.append({"type": "hardBreak"})
        content.append(_text(line))

    return {
        "type": "doc",
        "version": 1,
        "content": [{"type": "paragraph", "content": content}],
    }
