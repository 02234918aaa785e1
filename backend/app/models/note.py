"""
Notes API - Note SQLAlchemy Model
==================================

What:  ORM model representing the `notes` table.
How:   Inherits from the shared DeclarativeBase; created at startup by
       database.create_tables().
Who:   Used by NoteService for every CRUD operation.

Table Design:
    - UUID primary key, generated on insert and never changed afterwards
    - title is UNIQUE; a duplicate insert or rename raises IntegrityError,
      which NoteService turns into ConflictError
    - category/published are optional
    - created_at/updated_at are timezone-aware and filled in on write

Column types are the dialect-neutral SQLAlchemy ones (Uuid, DateTime) so the
same model runs on PostgreSQL in production and SQLite in the test suite.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Note(Base):
    """
    A single note.

    Lifecycle:
        1. Inserted by create_note (id and timestamps assigned on flush)
        2. Mutated in place by update_note; only supplied fields change
        3. Hard-deleted by delete_note
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        unique=True,
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    category: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        default=None,
    )

    published: Mapped[Optional[bool]] = mapped_column(
        Boolean,
        nullable=True,
        default=False,
        server_default=text("false"),
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    # Stored in UTC with timezone; updated_at is bumped by the ORM on every
    # UPDATE issued for the row.
    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<Note(id={self.id}, title='{self.title}')>"
