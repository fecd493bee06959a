# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Shared fixtures and helpers for all tests.

FakeJira serves the Jira endpoints the bridge uses from memory, through
httpx.MockTransport, and records every request it receives.
"""
import json
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest

from ticketbridge.config import JiraSettings
from ticketbridge.core.types import TicketRequest
from ticketbridge.trackers.jira import JiraClient, JiraCredentials


JIRA_URL = "https://jira.example.com"


class FakeJira:
    """In-memory Jira site.

    Attributes:
        users: Existing accounts, email -> accountId.
        priorities: Priority list returned by GET /priority.
        issues: Field payloads received by POST /issue, in order.
        requests: Every request received, in order.
        failures: (method, path) -> status code to answer with instead.
        search_result: Body returned by GET /search; startAt/maxResults are
            echoed from the request unless already present.
        issue_reply: Body returned by POST /issue instead of a generated key.
    """

    def __init__(self) -> None:
        self.users: dict[str, str] = {}
        self.priorities: list[dict[str, Any]] = [
            {"id": "1", "name": "Highest"},
            {"id": "2", "name": "High"},
            {"id": "3", "name": "Medium"},
            {"id": "4", "name": "Low"},
        ]
        self.issues: list[dict[str, Any]] = []
        self.requests: list[httpx.Request] = []
        self.failures: dict[tuple[str, str], int] = {}
        self.search_result: dict[str, Any] = {"issues": [], "total": 0}
        self.issue_reply: dict[str, Any] | None = None

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        """Return the recorded requests for one endpoint."""
        return [
            r for r in self.requests
            if r.method == method and r.url.path == f"/rest/api/3{path}"
        ]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/rest/api/3")

        status = self.failures.get((request.method, path))
        if status is not None:
            return httpx.Response(status, json={"errorMessages": ["Simulated failure"]})

        match (request.method, path):
            case ("GET", "/user/search"):
                email = request.url.params["query"]
                if email in self.users:
                    return httpx.Response(200, json=[{"accountId": self.users[email]}])
                return httpx.Response(200, json=[])
            case ("POST", "/user"):
                body = json.loads(request.content)
                account_id = f"acc-{len(self.users) + 1}"
                self.users[body["emailAddress"]] = account_id
                return httpx.Response(201, json={"accountId": account_id})
            case ("GET", "/priority"):
                return httpx.Response(200, json=self.priorities)
            case ("POST", "/issue"):
                body = json.loads(request.content)
                self.issues.append(body["fields"])
                if self.issue_reply is not None:
                    return httpx.Response(201, json=self.issue_reply)
                number = len(self.issues)
                return httpx.Response(201, json={"id": str(10000 + number), "key": f"INT-{number}"})
            case ("GET", "/search"):
                result = {
                    "startAt": int(request.url.params["startAt"]),
                    "maxResults": int(request.url.params["maxResults"]),
                    **self.search_result,
                }
                return httpx.Response(200, json=result)
        return httpx.Response(404, json={"errorMessages": ["Not found"]})


@pytest.fixture
def jira_settings() -> JiraSettings:
    """Jira settings for the fake site, independent of the environment."""
    return JiraSettings(
        base_url=JIRA_URL,
        email="bot@example.com",
        api_token="secret-token",
        project_key="INT",
    )


@pytest.fixture
def credentials(jira_settings: JiraSettings) -> JiraCredentials:
    return JiraCredentials.from_settings(jira_settings)


@pytest.fixture
def fake_jira() -> FakeJira:
    return FakeJira()


@pytest.fixture
async def jira_client(
    credentials: JiraCredentials, fake_jira: FakeJira
) -> AsyncIterator[JiraClient]:
    """JiraClient wired to the fake site."""
    client = JiraClient(credentials, transport=httpx.MockTransport(fake_jira.handler))
    yield client
    await client.aclose()


@pytest.fixture
def ticket_payload() -> Callable[..., dict[str, Any]]:
    """Factory for create-ticket request bodies, as a caller would send them."""

    def _make(**overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "summary": "Sync fails",
            "priority": "High",
            "link": "https://x/1",
            "collection": "orders",
            "user": {"email": "a@b.com", "username": "alice"},
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def make_ticket(ticket_payload: Callable[..., dict[str, Any]]) -> Callable[..., TicketRequest]:
    """Factory for validated TicketRequest objects."""

    def _make(**overrides: Any) -> TicketRequest:
        return TicketRequest.model_validate(ticket_payload(**overrides))

    return _make
