"""
Notes API - Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the API contract.
How:   FastAPI validates request bodies and query strings against these
       models and serializes responses through them (also used for the
       OpenAPI docs).

Every endpoint answers with an envelope:
    {
        "status": "success" | "fail" | "error",
        "data": {...},        # optional payload
        "message": "...",     # optional human-readable text
        "results": 3,         # list endpoint only
        "details": {...}      # optional error context
    }

"fail" marks a problem the client can fix (404, 409, 422); "error" marks a
server-side failure (500).
"""

import uuid
from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models - What the client sends
# ══════════════════════════════════════════════════════════════════════════


class CreateNoteSchema(BaseModel):
    """Body of POST /api/notes."""
    title: str = Field(description="Note title (must be unique)")
    content: str = Field(description="Note body")
    category: Optional[str] = Field(default=None, description="Free-form category")
    published: Optional[bool] = Field(default=None, description="Publication flag")


class UpdateNoteSchema(BaseModel):
    """
    Body of PUT /api/notes/{id}.

    Every field is optional. Fields that are omitted (or sent as null) keep
    their stored value.
    """
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    published: Optional[bool] = None


class FilterOptions(BaseModel):
    """
    Query parameters of GET /api/notes.

    Accepted for forward compatibility; the list endpoint currently returns
    every note regardless of these values.
    """
    page: Optional[int] = Field(default=None, ge=1, description="Page number (unused)")
    limit: Optional[int] = Field(default=None, ge=1, description="Page size (unused)")


# ══════════════════════════════════════════════════════════════════════════
# Response Models - What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """Outward representation of a stored note."""
    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    title: str
    content: str
    category: Optional[str] = None
    published: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class NoteData(BaseModel):
    note: NoteResponse


class NoteEnvelope(BaseModel):
    """Returned by the single-note endpoints (get, create, update)."""
    status: Literal["success"] = "success"
    data: NoteData


class NoteListEnvelope(BaseModel):
    """
    Returned by GET /api/notes.

    When no notes exist, `data` is omitted and `message` says so instead.
    """
    status: Literal["success"] = "success"
    results: int = Field(description="Number of notes returned")
    data: Optional[List[NoteResponse]] = None
    message: Optional[str] = None


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models - Consistent error format across all endpoints
# ══════════════════════════════════════════════════════════════════════════


class ErrorEnvelope(BaseModel):
    """
    Standardized error envelope.

    Example:
        {
            "status": "fail",
            "message": "Note with that title already exists"
        }
    """
    status: Literal["fail", "error"]
    message: str
    details: Optional[Any] = None


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
