"""Status schemas."""

from .base import BaseSchema


class StatusResponse(BaseSchema):
    """Snapshot of the most recent completion call."""

    active_model: str | None = None
    active_agent: str | None = None
    last_response_ms: int | None = None
    last_error: str | None = None
