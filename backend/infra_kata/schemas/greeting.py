"""Greeting Schemas — response contract for GET /api/hello."""

from pydantic import BaseModel, Field


class GreetingResponse(BaseModel):
    """Constant message plus the instant the handler ran."""
    message: str = Field(examples=["Hello Infra Kata"])
    timestamp: str = Field(
        pattern=r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{3}|\.\d{6})?Z$",
        examples=["2024-01-01T00:00:00Z"],
    )
