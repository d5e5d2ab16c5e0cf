"""
GenexMart Backend: Shared Response Schemas
=============================================

What:  Response shapes used by more than one resource.
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Fixed acknowledgement returned by update and delete routes."""
    message: str = Field(description="Human-readable acknowledgement")


class ErrorResponse(BaseModel):
    """
    Error body for every failure.

    Example:
        {"error": "Duplicate entry 'AB' for key 'PRIMARY'"}
    """
    error: str = Field(description="Raw error message")


class HealthResponse(BaseModel):
    """Health check response showing service and store status."""
    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
