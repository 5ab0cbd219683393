"""
Project Backend — Custom Exception Hierarchy
==============================================

What:  Defines application-specific exceptions for failures that cross the
       service boundary.
Why:   Global exception handlers (registered in main.py) turn these into
       structured JSON error responses with the right HTTP status code,
       without leaking internal details to the client.
How:   Each exception class carries a message and optional context dict.
Who:   Raised by repositories and services; caught by global handlers.

Exception Hierarchy:
    ProjectError (base)
    ├── PackageDeletionError     → 500 Internal Server Error
    └── DatabaseError            → 500 Internal Server Error

User validation failures are NOT exceptions: the user service reports them
in-band inside a UserResponse (HTTP 200 with statusCode set).
"""

from typing import Any, Dict, Optional


class ProjectError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class PackageDeletionError(ProjectError):
    """
    Raised when a package could not be physically deleted.

    What:    The delete removed no record (unknown id or concurrent delete).
    HTTP:    500 Internal Server Error

    Packages are hard-deleted, unlike users, so a failed delete is surfaced
    to the caller as a generic failure rather than an in-band status.
    """

    def __init__(
        self,
        package_id: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if package_id is not None:
            ctx["package_id"] = package_id
        super().__init__(message="The package could not be deleted", context=ctx)
        self.package_id = package_id


class DatabaseError(ProjectError):
    """
    Raised when entity store operations fail unexpectedly.

    HTTP: 500 Internal Server Error

    The message returned to the client is always generic; the original
    error is kept in the context and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
