"""
Project Backend — Shared Response Schemas
===========================================

What:  Pydantic models shared by every route: error envelope and health status.
Why:   Clients need one error structure to parse programmatically, whichever
       endpoint failed.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    What:  Standardized body for HTTP-level errors (4xx/5xx).

    User validation failures do NOT use this shape; they come back as a
    UserResponse with statusCode/description set and HTTP 200.

    Example:
        {
            "error": "package_deletion_failed",
            "message": "The package could not be deleted",
            "request_id": "1f3a9c2e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and store status.
    Who:   Returned by GET /health for monitoring and load balancer probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
