# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Ticket routes and exception handlers."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic_core import ValidationError

from ticketbridge.core.exceptions import BackendError, TicketBridgeError
from ticketbridge.core.types import CreatedTicket, TicketPage, TicketQuery, TicketRequest
from ticketbridge.server.dependencies import get_ticket_service
from ticketbridge.server.models.responses import ErrorResponse
from ticketbridge.services.tickets import TicketService


router = APIRouter(tags=["tickets"])

CREATE_TICKET_PATH = "/create-ticket"
LIST_TICKETS_PATH = "/tickets"

# Callers only ever see these; causes are logged server-side
_FAILURE_MESSAGES = {
    CREATE_TICKET_PATH: "Error creating ticket",
    LIST_TICKETS_PATH: "Error fetching tickets",
}
_VALIDATION_MESSAGES = {
    CREATE_TICKET_PATH: "All fields are required",
    LIST_TICKETS_PATH: "Invalid query parameters",
}


@router.post(CREATE_TICKET_PATH, response_model=CreatedTicket)
async def create_ticket(
    ticket: TicketRequest,
    service: TicketService = Depends(get_ticket_service),
) -> CreatedTicket:
    """Create a Jira ticket from a simplified request.

    Args:
        ticket: Ticket fields and reporter.
        service: Ticket service dependency.

    Returns:
        CreatedTicket with the issue key and browse URL.

    Raises:
        ResolutionError: If the reporter or priority cannot be resolved.
        BackendError: If Jira rejects the issue.
    """
    return await service.create_ticket(ticket)


@router.get(LIST_TICKETS_PATH, response_model=TicketPage)
async def list_tickets(
    reported_by: Annotated[str, Query(alias="reportedBy", min_length=1)],
    start_at: Annotated[int, Query(alias="startAt", ge=0)] = 0,
    max_results: Annotated[int, Query(alias="maxResults", ge=1)] = 10,
    service: TicketService = Depends(get_ticket_service),
) -> TicketPage:
    """List tickets filed by a reporter.

    Args:
        reported_by: Reporter to filter on (exact match).
        start_at: Index of the first result.
        max_results: Page size.
        service: Ticket service dependency.

    Returns:
        TicketPage with Jira's issues and pagination values.

    Raises:
        ValidationError: If reportedBy is blank.
        BackendError: If the Jira search fails.
    """
    query = TicketQuery(reported_by=reported_by, start_at=start_at, max_results=max_results)
    return await service.list_tickets(query)


def _serialize_errors(errors: list) -> list[dict[str, object]]:
    serialized: list[dict[str, object]] = []
    for error in errors:
        entry: dict[str, object] = {
            "type": error["type"],
            "loc": list(error["loc"]),
            "msg": error["msg"],
        }
        if "ctx" in error:
            entry["ctx"] = {k: str(v) for k, v in error["ctx"].items()}
        serialized.append(entry)
    return serialized


def _validation_response(request: Request, errors: list) -> JSONResponse:
    message = _VALIDATION_MESSAGES.get(request.url.path, "Validation failed")
    logger.warning("Validation error", path=request.url.path, errors=len(errors))
    error = ErrorResponse(
        code="VALIDATION_ERROR",
        error=message,
        details={"errors": _serialize_errors(errors)},
    )
    return JSONResponse(status_code=400, content=error.model_dump())


def configure_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers for the FastAPI application.

    Validation failures map to 400. Bridge and backend failures map to 500
    with a fixed per-endpoint message.

    Args:
        app: FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed or incomplete requests with 400 Bad Request."""
        return _validation_response(request, list(exc.errors()))

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle Pydantic ValidationError with 400 Bad Request."""
        return _validation_response(request, exc.errors())

    @app.exception_handler(TicketBridgeError)
    async def bridge_error_handler(
        request: Request, exc: TicketBridgeError
    ) -> JSONResponse:
        """Handle resolution and backend failures with 500 Internal Server Error.

        Args:
            request: The incoming request.
            exc: The exception instance.

        Returns:
            JSONResponse with 500 status code and a generic message.
        """
        extra: dict[str, object] = {"path": request.url.path, "error_type": type(exc).__name__}
        cause = exc if isinstance(exc, BackendError) else exc.__cause__
        if isinstance(cause, BackendError):
            extra.update(backend_status=cause.status_code, backend_body=cause.body)
        logger.opt(exception=exc).error("Request failed", error=str(exc), **extra)

        error = ErrorResponse(
            code="INTERNAL_ERROR",
            error=_FAILURE_MESSAGES.get(request.url.path, "Internal server error"),
        )
        return JSONResponse(status_code=500, content=error.model_dump())

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions with 500 Internal Server Error."""
        logger.exception("Unhandled exception", path=request.url.path, error=str(exc))
        error = ErrorResponse(
            code="INTERNAL_ERROR",
            error="Internal server error",
        )
        return JSONResponse(status_code=500, content=error.model_dump())
