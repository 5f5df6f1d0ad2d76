"""
NoteKeeper Backend - Pydantic Request/Response Schemas
=======================================================

What:  The API contract between the frontend and the backend.
How:   FastAPI validates request bodies against these models and serializes
       responses through them. Responses use camelCase aliases
       (createdAt, updatedAt) to match the JSON shape the client expects.

Request models declare every field Optional on purpose: a missing or blank
field is a business rule with its own message ("Title and Content are
required"), checked in NoteService, not a schema error.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """Body of POST /api/notes. Both fields are required by NoteService."""
    title: Optional[str] = Field(default=None, description="Note title")
    content: Optional[str] = Field(default=None, description="Note body")


class NoteUpdate(BaseModel):
    """
    Body of PUT /api/notes/{id}.

    Either field may be omitted. NoteService validates the raw body against
    this model after the note is found. Only fields present in the body are
    validated and applied; use `present_fields()` to tell "omitted" from
    "sent as null".
    """
    title: Optional[str] = Field(default=None, description="New title (optional)")
    content: Optional[str] = Field(default=None, description="New body (optional)")

    def present_fields(self) -> dict:
        return {name: getattr(self, name) for name in ("title", "content")
                if name in self.model_fields_set}


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Full representation of a note.
    Who:   Returned by every notes endpoint except DELETE.

    JSON:  {id, title, content, createdAt, updatedAt}
    """
    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body")
    created_at: datetime = Field(description="When the note was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="When the note was last modified (UTC ISO 8601)")

    model_config = {
        "from_attributes": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Backends without timezone support (SQLite) hand back naive UTC values."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class MessageResponse(BaseModel):
    """Plain acknowledgement, returned by DELETE /api/notes/{id}."""
    message: str = Field(description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by every endpoint.

    Example:
        {
            "error": "not_found",
            "message": "Note not found",
            "request_id": "1f0c2a9e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
