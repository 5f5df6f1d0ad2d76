"""
NoteKeeper Backend - Note Service (Business Logic)
====================================================

What:  The rules of the notes API: trimming, required fields, id parsing,
       not-found detection and translation of store failures.
How:   Stateless. Each call receives the NoteStore to work against, the
       same way the routes receive it from FastAPI's dependency injection.

Error Handling Strategy:
    - Client mistakes raise ValidationError (400) or NotFoundError (404)
    - Anything the store raises is logged and wrapped in DatabaseError (500)
    - Our own exceptions pass through untouched

Update ordering:
    lookup → validate every present field → mutate → persist once
    A rejected update leaves the record exactly as it was.
"""

import logging
import re
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import ValidationError as SchemaError

from app.exceptions import DatabaseError, NoteKeeperError, NotFoundError, ValidationError
from app.models.note import Note
from app.schemas.note import NoteResponse, NoteUpdate
from app.services.store_base import NoteStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Title and Content are required"
INVALID_ID_MESSAGE = "Invalid ID"
DELETED_MESSAGE = "Deleted successfully"
INVALID_BODY_MESSAGE = "Invalid request body"

# str.strip() leaves U+FEFF in place
_EDGE_WHITESPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def _trimmed(value: Optional[str]) -> str:
    return _EDGE_WHITESPACE.sub("", value) if isinstance(value, str) else ""


def _update_fields(body: Any) -> Dict[str, Optional[str]]:
    """Fields sent in an update body; None means no body at all."""
    if body is None:
        return {}
    try:
        payload = NoteUpdate.model_validate(body)
    except SchemaError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ValidationError(message=INVALID_BODY_MESSAGE, context={"fields": fields})
    return payload.present_fields()


def parse_note_id(raw_id: str) -> UUID:
    """Parse a path identifier, rejecting anything that is not a UUID with a 400."""
    try:
        return UUID(str(raw_id))
    except ValueError:
        raise ValidationError(
            message=INVALID_ID_MESSAGE,
            field="id",
            context={"value": str(raw_id)[:64]},
        )


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes():  all notes, newest first
        - get_note():    one note by id
        - create_note(): trim, require both fields, persist
        - update_note(): partial, validate-then-apply update
        - delete_note(): hard delete
    """

    async def list_notes(self, store: NoteStore) -> List[NoteResponse]:
        try:
            notes = await store.list()
        except Exception as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes. Please try again.",
                context={"error_type": type(e).__name__},
            )
        return [NoteResponse.model_validate(note) for note in notes]

    async def get_note(self, store: NoteStore, raw_id: str) -> NoteResponse:
        note = await self._require_note(store, parse_note_id(raw_id))
        return NoteResponse.model_validate(note)

    async def create_note(
        self,
        store: NoteStore,
        title: Optional[str],
        content: Optional[str],
    ) -> NoteResponse:
        """
        Create a note from raw client input.

        Both fields are trimmed first; if either ends up empty nothing is
        written and a 400 is raised with a single combined message.

        Raises:
            ValidationError: title or content missing or blank
            DatabaseError:   the store failed
        """
        clean_title = _trimmed(title)
        clean_content = _trimmed(content)
        if not clean_title or not clean_content:
            missing = [name for name, value in (("title", clean_title), ("content", clean_content))
                       if not value]
            raise ValidationError(
                message=REQUIRED_FIELDS_MESSAGE,
                context={"fields": missing},
            )

        try:
            note = await store.create(title=clean_title, content=clean_content)
        except Exception as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the note. Please try again.",
                context={"error_type": type(e).__name__},
            )
        return NoteResponse.model_validate(note)

    async def update_note(
        self,
        store: NoteStore,
        raw_id: str,
        body: Any = None,
    ) -> NoteResponse:
        """
        Apply a partial update.

        Args:
            store:   Note store for this request
            raw_id:  Path identifier, not yet parsed
            body:    Decoded JSON body as sent. Only the fields present are
                     applied; an explicit null counts as sent and blank.
                     Its shape is checked after the lookup, so a missing
                     note is a 404 whatever the body holds.

        Raises:
            ValidationError: malformed id, body not an object of strings,
                             or a sent field is blank
            NotFoundError:   no note with this id
            DatabaseError:   the store failed
        """
        note_id = parse_note_id(raw_id)
        note = await self._require_note(store, note_id)
        changes = _update_fields(body)

        staged: Dict[str, str] = {}
        for field in ("title", "content"):
            if field not in changes:
                continue
            value = _trimmed(changes[field])
            if not value:
                raise ValidationError(
                    message=f"{field.capitalize()} cannot be empty",
                    field=field,
                )
            staged[field] = value

        for field, value in staged.items():
            setattr(note, field, value)

        try:
            note = await store.save(note)
        except Exception as e:
            logger.error("Database error saving note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the note. Please try again.",
                context={"note_id": str(note_id), "error_type": type(e).__name__},
            )
        return NoteResponse.model_validate(note)

    async def delete_note(self, store: NoteStore, raw_id: str) -> str:
        """Delete a note; returns the confirmation message for the response body."""
        note_id = parse_note_id(raw_id)
        try:
            removed = await store.delete_by_id(note_id)
        except Exception as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the note. Please try again.",
                context={"note_id": str(note_id), "error_type": type(e).__name__},
            )
        if not removed:
            raise NotFoundError(resource="Note", resource_id=str(note_id))
        return DELETED_MESSAGE

    async def _require_note(self, store: NoteStore, note_id: UUID) -> Note:
        try:
            note = await store.get(note_id)
        except NoteKeeperError:
            raise
        except Exception as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the note. Please try again.",
                context={"note_id": str(note_id)},
            )
        if note is None:
            raise NotFoundError(resource="Note", resource_id=str(note_id))
        return note


note_service = NoteService()
