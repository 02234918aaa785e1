"""
Notes API - Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the failure cases of the API.
How:   Each exception carries a user-safe message and an optional context
       dict. Global exception handlers (registered in main.py) turn them into
       error envelopes with the matching HTTP status.
Who:   Raised by NoteService; caught by the handlers in main.py.

Exception Hierarchy:
    NotesApiError (base)   → 500 Internal Server Error
    ├── NotFoundError      → 404 Not Found
    ├── ConflictError      → 409 Conflict
    └── DatabaseError      → 500 Internal Server Error

Request validation (malformed UUIDs, malformed bodies) is left to FastAPI's
RequestValidationError; main.py renders it as a 422 envelope.
"""

from typing import Any, Dict, Optional


class NotesApiError(Exception):
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


class NotFoundError(NotesApiError):
    """
    Raised when a requested note does not exist.

    When:    get/update of an unknown id, or a delete that affected no rows.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource.lower()} was not found"
        if resource_id:
            message = f"{resource} with ID: {resource_id} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class ConflictError(NotesApiError):
    """
    Raised when a write would break a unique constraint.

    When:    Creating a note, or renaming one, with a title that is taken.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "Note with that title already exists",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class DatabaseError(NotesApiError):
    """
    Raised when a database operation fails unexpectedly.

    When:    Connection lost mid-query, deadlock, driver error, etc.
    HTTP:    500 Internal Server Error

    The message is always one of the service's fixed strings. The driver's
    own error text goes into `context` and the server log only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
