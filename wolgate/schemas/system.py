"""Health check schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response, reports what a wake request would use."""
    status: str = "ok"
    version: str
    service: str = "wolgate"
    default_remote: str
    route_command: str
    route_available: bool
