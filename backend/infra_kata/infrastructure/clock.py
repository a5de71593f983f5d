"""Clock — wall-clock access for route handlers.

Invariants:
    - utc_now() always returns a timezone-aware UTC datetime
    - Routes obtain the clock via Depends(get_clock), never call datetime directly

Design Decisions:
    - Clock as a FastAPI dependency: tests swap it via app.dependency_overrides
      instead of monkeypatching datetime
"""

from collections.abc import Callable
from datetime import datetime, timezone

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def get_clock() -> Clock:
    """FastAPI dependency returning the system clock."""
    return utc_now
