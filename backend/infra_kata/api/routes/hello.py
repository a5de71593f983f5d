"""Hello Route — GET /api/hello returns the greeting and the current instant.

Invariants:
    - Always 200; no parameters, headers, or body consumed
    - Clock read exactly once per request, through the get_clock dependency
"""

import logging
from fastapi import APIRouter, Depends, status

from infra_kata.core.greeting import build_greeting
from infra_kata.infrastructure.clock import Clock, get_clock
from infra_kata.schemas.greeting import GreetingResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["hello"])


@router.get(
    "/hello",
    response_model=GreetingResponse,
    status_code=status.HTTP_200_OK,
)
async def hello(clock: Clock = Depends(get_clock)):
    """Return the constant greeting stamped with the time of this call."""
    payload = build_greeting(clock())
    logger.debug(
        f"Greeting served at {payload['timestamp']}",
        extra={"path": "/api/hello"},
    )
    return payload
