"""
NoteKeeper Backend - Abstract Note Store Interface
====================================================

What:  The data-access contract the notes API depends on.
How:   Concrete stores inherit from NoteStore and implement every method.
       The API layer receives a store through a FastAPI dependency
       (app.routes.notes.get_note_store), so tests and alternative backends
       swap it with `app.dependency_overrides` instead of patching globals.

Implementations:
    - SQLAlchemyNoteStore: async SQLAlchemy over the configured database
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from app.models.note import Note


class NoteStore(ABC):
    """
    Persistence contract for notes.

    Contract:
        - Ids and both timestamps are assigned here, never by callers
        - Listings are ordered by created_at, newest first
        - Every write is a single-record operation; there are no
          transactions spanning several notes
        - Callers pass values that are already trimmed and validated
        - Infrastructure failures propagate as the backend's own exception
          types; translating them is the service layer's job
    """

    @abstractmethod
    async def list(self) -> List[Note]:
        """All notes, ordered by created_at descending. Unbounded."""
        ...

    @abstractmethod
    async def get(self, note_id: UUID) -> Optional[Note]:
        """The note with this id, or None."""
        ...

    @abstractmethod
    async def create(self, title: str, content: str) -> Note:
        """
        Persist a new note.

        Assigns the id and sets created_at and updated_at to the same instant.
        """
        ...

    @abstractmethod
    async def save(self, note: Note) -> Note:
        """
        Persist the current field values of an existing note.

        Advances updated_at strictly past its previous value.
        """
        ...

    @abstractmethod
    async def delete_by_id(self, note_id: UUID) -> bool:
        """Hard-delete a note. Returns True if a record was removed."""
        ...
