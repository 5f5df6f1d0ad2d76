"""
NoteKeeper Backend - Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions, one per error category of the API.
How:   Each exception carries a user-facing message and a context dict.
       Global handlers registered in main.py turn them into JSON responses
       with the matching status code. Context is logged; for server errors
       it is never sent to the client.

Exception Hierarchy:
    NoteKeeperError (base)
    ├── ValidationError   → 400 Bad Request
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error
"""

from typing import Any, Dict, Optional

# Only message ever sent to the client for a 5xx
GENERIC_SERVER_ERROR = "An internal error occurred. Please try again later."


class NoteKeeperError(Exception):
    """
    Base exception for all NoteKeeper application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not returned for 5xx errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoteKeeperError):
    """
    Raised when client input fails validation.

    When:    Missing or blank title/content, a malformed note id, or a request
             body FastAPI could not parse.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Title cannot be empty",
            "details": {"field": "title"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NoteKeeperError):
    """
    Raised when a requested resource does not exist.

    The store returns None (or False for deletes) for missing records; the
    service layer converts that into this exception.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)


class DatabaseError(NoteKeeperError):
    """
    Raised when a store operation fails unexpectedly.

    When:    Connection lost, timeout, constraint violation, driver error.
    HTTP:    500 Internal Server Error

    The handler always answers with a generic message; the original error
    type only reaches the server log through `context`.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
