# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Health check endpoints for liveness probes and basic process metrics."""
from datetime import UTC, datetime
from typing import Literal

import psutil
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from ticketbridge import __version__
from ticketbridge.server.dependencies import get_ticket_service
from ticketbridge.services.tickets import TicketService


router = APIRouter(prefix="/health", tags=["health"])


class LivenessResponse(BaseModel):
    """Response model for liveness probe."""

    status: Literal["alive"] = "alive"


class HealthResponse(BaseModel):
    """Response model for detailed health check."""

    status: Literal["healthy"] = "healthy"
    version: str
    uptime_seconds: float
    memory_mb: float
    cpu_percent: float
    backend_url: str


@router.get("/live", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    """Minimal liveness check - is the server responding?"""
    return LivenessResponse()


@router.get("", response_model=HealthResponse)
async def health(
    request: Request,
    service: TicketService = Depends(get_ticket_service),
) -> HealthResponse:
    """Health check with version, uptime and process metrics.

    Jira itself is not probed; its URL is reported so operators can see
    where requests are forwarded.
    """
    process = psutil.Process()
    start_time: datetime = request.app.state.start_time
    uptime = (datetime.now(UTC) - start_time).total_seconds()

    # cpu_percent(interval=None) is non-blocking - returns cached value from previous call
    cpu_percent = process.cpu_percent(interval=None)

    return HealthResponse(
        version=__version__,
        uptime_seconds=uptime,
        memory_mb=round(process.memory_info().rss / 1024 / 1024, 2),
        cpu_percent=cpu_percent,
        backend_url=service.backend_url,
    )
