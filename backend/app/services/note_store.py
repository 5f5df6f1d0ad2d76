"""
NoteKeeper Backend - SQLAlchemy Note Store
============================================

What:  NoteStore implementation over an async SQLAlchemy session.
How:   Each mutating call commits on its own, so every write is atomic for
       its single row and nothing is left pending for the session dependency.

Query plans:
    list():          SELECT ... ORDER BY created_at DESC  (idx_notes_created_at)
    get():           primary key lookup
    delete_by_id():  DELETE ... WHERE id = :id, rowcount tells if it existed
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.note import Note, utcnow
from app.services.store_base import NoteStore

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite returns naive datetimes for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """Current UTC time, bumped by a microsecond if the clock has not moved past `previous`."""
    now = utcnow()
    if previous is not None:
        previous = _as_utc(previous)
        if now <= previous:
            now = previous + timedelta(microseconds=1)
    return now


class SQLAlchemyNoteStore(NoteStore):
    """
    Note store bound to one AsyncSession (one per request).

    The session is created and closed by app.database.get_db_session;
    this class never opens or closes it.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list(self) -> List[Note]:
        result = await self._session.execute(
            select(Note).order_by(desc(Note.created_at))
        )
        return list(result.scalars().all())

    async def get(self, note_id: UUID) -> Optional[Note]:
        return await self._session.get(Note, note_id)

    async def create(self, title: str, content: str) -> Note:
        now = utcnow()
        note = Note(title=title, content=content, created_at=now, updated_at=now)
        self._session.add(note)
        await self._session.commit()
        logger.info("Note created: %s", note.id)
        return note

    async def save(self, note: Note) -> Note:
        note.updated_at = next_timestamp(note.updated_at)
        self._session.add(note)
        await self._session.commit()
        logger.info("Note saved: %s", note.id)
        return note

    async def delete_by_id(self, note_id: UUID) -> bool:
        result = await self._session.execute(
            delete(Note).where(Note.id == note_id)
        )
        await self._session.commit()
        removed = result.rowcount > 0
        if removed:
            logger.info("Note deleted: %s", note_id)
        return removed
