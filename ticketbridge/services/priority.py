"""Priority name resolution."""

from loguru import logger

from ticketbridge.core.exceptions import (
    BackendError,
    PriorityLookupError,
    PriorityNotFoundError,
)
from ticketbridge.trackers.jira import JiraClient


async def resolve_priority(client: JiraClient, name: str) -> str:
    """Map a priority name to its Jira id, ignoring case.

    The priority list is fetched on every call.

    Args:
        client: Jira client.
        name: Priority name as given by the caller (e.g., 'high').

    Returns:
        The priority id.

    Raises:
        PriorityLookupError: If the priority list cannot be fetched.
        PriorityNotFoundError: If no priority has that name.
    """
    try:
        priorities = await client.list_priorities()
        by_name = {p["name"].lower(): p["id"] for p in priorities}
    except (BackendError, KeyError, TypeError, AttributeError) as e:
        logger.error("Error getting priority ID", priority=name, error=str(e))
        raise PriorityLookupError(name) from e

    priority_id = by_name.get(name.lower())
    if priority_id is None:
        logger.warning("Unknown priority", priority=name, known=sorted(by_name))
        raise PriorityNotFoundError(name)
    return priority_id
