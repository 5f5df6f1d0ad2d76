"""
NoteKeeper Backend - Note SQLAlchemy Model
============================================

What:  ORM model for the `notes` table.
Who:   Used by SQLAlchemyNoteStore for CRUD and by Alembic for the schema.

Table design:
    - id: UUID primary key, generated in Python at insert time
    - title / content: TEXT, stored already trimmed, never blank
    - created_at / updated_at: UTC, timezone-aware; both set by the store

    Index on created_at DESC serves the only listing query
    (ORDER BY created_at DESC). CHECK constraints mirror the migration so
    tables built with create_all reject blank text as well.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Note(Base):
    """
    A single note.

    Lifecycle:
        1. Created by NoteStore.create() (id, created_at == updated_at)
        2. Mutated in place by NoteStore.save() (updated_at advances)
        3. Removed by NoteStore.delete_by_id() (hard delete)
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier, assigned at creation and never changed",
    )

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Trimmed, non-empty title",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Trimmed, non-empty body",
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    # Stored in UTC; conversion to local time is the client's job
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        comment="When this note was created (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        comment="When this note was last modified (UTC)",
    )

    __table_args__ = (
        Index("idx_notes_created_at", created_at.desc()),
        CheckConstraint("length(trim(title)) > 0", name="ck_notes_title_not_blank"),
        CheckConstraint("length(trim(content)) > 0", name="ck_notes_content_not_blank"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r}, created_at='{self.created_at}')>"
