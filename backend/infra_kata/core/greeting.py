"""Greeting — builds the /api/hello payload from a given instant.

Invariants:
    - Payload has exactly two keys, in order: message, timestamp
    - message is always GREETING_MESSAGE
    - timestamp is ISO-8601 UTC with a trailing "Z"
    - Fractional seconds printed only when non-zero, in 3-digit groups

Design Decisions:
    - Clock passed in as an argument: the function stays pure and testable
      without patching datetime
"""

from datetime import datetime, timezone

GREETING_MESSAGE = "Hello Infra Kata"


def format_instant(instant: datetime) -> str:
    """Render an instant as e.g. 2024-01-01T00:00:00Z or ...00.120Z.

    Naive datetimes are assumed to already be UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    else:
        instant = instant.astimezone(timezone.utc)

    text = instant.replace(tzinfo=None, microsecond=0).isoformat()
    if instant.microsecond:
        fraction = f"{instant.microsecond:06d}"
        if fraction.endswith("000"):
            fraction = fraction[:3]
        text = f"{text}.{fraction}"
    return f"{text}Z"


def build_greeting(now: datetime) -> dict[str, str]:
    return {
        "message": GREETING_MESSAGE,
        "timestamp": format_instant(now),
    }
