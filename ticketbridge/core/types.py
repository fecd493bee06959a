"""Request-scoped ticket types shared by the service and the HTTP layer.

All models serialize with camelCase keys (``issueKey``, ``startAt``) and
accept either camelCase or snake_case on input.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


NonEmptyStr = Annotated[str, Field(min_length=1)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TicketUser(_CamelModel):
    """Person reporting a ticket.

    Attributes:
        username: Display name of the reporter in the calling application.
        email: Email address used to find or create the backend account.
    """

    username: NonEmptyStr
    email: NonEmptyStr


class TicketRequest(_CamelModel):
    """Simplified ticket submitted by a caller.

    Attributes:
        summary: One-line ticket summary.
        priority: Human-readable priority name (e.g., 'High').
        link: URL of the record the ticket refers to.
        collection: Name of the collection the record belongs to.
        user: Reporter of the ticket.
    """

    summary: NonEmptyStr
    priority: NonEmptyStr
    link: NonEmptyStr
    collection: NonEmptyStr
    user: TicketUser


class CreatedTicket(_CamelModel):
    """Key and browse URL of a newly created ticket."""

    issue_key: Annotated[str, Field(description="Backend issue key, e.g. 'INT-42'")]
    issue_url: Annotated[str, Field(description="Browse URL of the issue")]


class TicketQuery(_CamelModel):
    """Filter and pagination for listing tickets by reporter."""

    reported_by: NonEmptyStr
    start_at: Annotated[int, Field(ge=0)] = 0
    max_results: Annotated[int, Field(ge=1)] = 10

    @field_validator("reported_by")
    @classmethod
    def _reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("reportedBy must not be blank")
        return v


class TicketPage(_CamelModel):
    """One page of backend issues, passed through as returned by the backend."""

    issues: list[dict[str, Any]]
    total: int
    start_at: int
    max_results: int
