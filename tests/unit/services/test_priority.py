"""Tests for priority name resolution."""
from unittest.mock import AsyncMock

import pytest

from ticketbridge.core.exceptions import (
    BackendError,
    PriorityLookupError,
    PriorityNotFoundError,
    PriorityResolutionError,
    ResolutionError,
)
from ticketbridge.services.priority import resolve_priority
from ticketbridge.trackers.jira import JiraClient


@pytest.fixture
def client() -> AsyncMock:
    mock = AsyncMock(spec=JiraClient)
    mock.list_priorities.return_value = [
        {"id": "1", "name": "Highest"},
        {"id": "2", "name": "High"},
        {"id": "3", "name": "Medium"},
    ]
    return mock


@pytest.mark.parametrize("name", ["High", "high", "HIGH", "hIgH"])
async def test_matching_ignores_case(client: AsyncMock, name: str) -> None:
    assert await resolve_priority(client, name) == "2"


async def test_no_partial_matching(client: AsyncMock) -> None:
    """'Hig' does not match 'High' or 'Highest'."""
    with pytest.raises(PriorityNotFoundError):
        await resolve_priority(client, "Hig")


async def test_unknown_priority_names_the_value(client: AsyncMock) -> None:
    with pytest.raises(PriorityNotFoundError) as exc_info:
        await resolve_priority(client, "Urgent")

    assert exc_info.value.priority == "Urgent"
    assert "Priority 'Urgent' is not valid" in str(exc_info.value)


async def test_list_is_fetched_on_every_call(client: AsyncMock) -> None:
    await resolve_priority(client, "High")
    await resolve_priority(client, "Medium")

    assert client.list_priorities.await_count == 2


async def test_backend_failure_is_lookup_error(client: AsyncMock) -> None:
    client.list_priorities.side_effect = BackendError(
        "boom", method="GET", path="/rest/api/3/priority", status_code=502
    )

    with pytest.raises(PriorityLookupError) as exc_info:
        await resolve_priority(client, "High")

    assert isinstance(exc_info.value.__cause__, BackendError)


def test_both_failures_share_the_resolution_family() -> None:
    assert issubclass(PriorityNotFoundError, PriorityResolutionError)
    assert issubclass(PriorityLookupError, PriorityResolutionError)
    assert issubclass(PriorityResolutionError, ResolutionError)
