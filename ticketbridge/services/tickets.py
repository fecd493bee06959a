# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Ticket creation and listing against Jira."""

from typing import Any

from loguru import logger

from ticketbridge.config import JiraSettings
from ticketbridge.core.exceptions import BackendError
from ticketbridge.core.types import CreatedTicket, TicketPage, TicketQuery, TicketRequest
from ticketbridge.services.description import build_description
from ticketbridge.services.identity import resolve_reporter
from ticketbridge.services.priority import resolve_priority
from ticketbridge.trackers.jira import JiraClient


# Always requested when listing; custom fields are appended from settings
BASE_LIST_FIELDS = ["summary", "status", "priority", "key"]


def reporter_jql(reported_by: str) -> str:
    """Build an exact-match JQL filter on the issue reporter.

    Backslashes and double quotes are escaped so the value stays inside the
    quoted string.

    Args:
        reported_by: Reporter identity as supplied by the caller.

    Returns:
        JQL expression, e.g. ``reporter="alice"``.
    """
    escaped = reported_by.replace("\\", "\\\\").replace('"', '\\"')
    return f'reporter="{escaped}"'


class TicketService:
    """Translates simplified ticket requests into Jira calls.

    Holds no per-request state; one instance serves every request.
    """

    def __init__(self, client: JiraClient, settings: JiraSettings) -> None:
        """Initialize TicketService.

        Args:
            client: Jira client used for every outbound call.
            settings: Project key, issue type and custom field ids.
        """
        self._client = client
        self._settings = settings

    @property
    def backend_url(self) -> str:
        return self._client.base_url

    def _issue_fields(
        self,
        ticket: TicketRequest,
        priority_id: str,
        reporter_id: str,
    ) -> dict[str, Any]:
        s = self._settings
        return {
            "project": {"key": s.project_key},
            "summary": ticket.summary,
            "issuetype": {"name": s.issue_type},
            "priority": {"id": priority_id},
            "description": build_description(ticket),
            "reporter": {"accountId": reporter_id},
            s.username_field: ticket.user.username,
            s.collection_field: ticket.collection,
            s.link_field: ticket.link,
        }

    async def create_ticket(self, ticket: TicketRequest) -> CreatedTicket:
        """File a ticket in Jira.

        Resolves the reporter, then the priority, then creates the issue.
        Each step runs only if the previous one succeeded.

        Args:
            ticket: Validated ticket request.

        Returns:
            Key and browse URL of the new issue.

        Raises:
            UserResolutionError: If the reporter account cannot be found or created.
            PriorityResolutionError: If the priority cannot be resolved.
            BackendError: If issue creation fails.
        """
        reporter_id = await resolve_reporter(
            self._client, ticket.user.email, ticket.user.username
        )
        priority_id = await resolve_priority(self._client, ticket.priority)

        created = await self._client.create_issue(
            self._issue_fields(ticket, priority_id, reporter_id)
        )
        try:
            issue_key = created["key"]
        except (KeyError, TypeError):
            issue_key = None
        if not isinstance(issue_key, str) or not issue_key:
            raise BackendError(
                "Jira issue creation returned no key",
                method="POST",
                path="/rest/api/3/issue",
                body=created,
            )

        logger.info(
            "Created ticket",
            issue_key=issue_key,
            reporter=ticket.user.username,
            collection=ticket.collection,
        )
        try:
            return CreatedTicket(issue_key=issue_key, issue_url=self._client.browse_url(issue_key))
        except ValueError as e:
            raise BackendError(
                "Jira issue creation returned an unexpected body",
                method="POST",
                path="/rest/api/3/issue",
                body=created,
            ) from e

    async def list_tickets(self, query: TicketQuery) -> TicketPage:
        """Return one page of tickets filed by a reporter.

        Args:
            query: Reporter filter and pagination.

        Returns:
            Issues and pagination exactly as reported by Jira.

        Raises:
            BackendError: If the search fails.
        """
        data = await self._client.search_issues(
            reporter_jql(query.reported_by),
            fields=[*BASE_LIST_FIELDS, *self._settings.list_fields],
            start_at=query.start_at,
            max_results=query.max_results,
        )
        try:
            return TicketPage(
                issues=data["issues"],
                total=data["total"],
                start_at=data["startAt"],
                max_results=data["maxResults"],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise BackendError(
                "Jira search returned an unexpected body",
                method="GET",
                path="/rest/api/3/search",
                body=data,
            ) from e
