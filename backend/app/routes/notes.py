"""
NoteKeeper Backend - Notes Route Handlers
===========================================

What:  HTTP surface of the notes API.
How:   Each handler takes a NoteStore from `get_note_store`, delegates to
       NoteService and returns the response model. Status codes for errors
       come from the global exception handlers in main.py.

Route Inventory:
    GET    /api/notes        → 200 list, newest first
    POST   /api/notes        → 201 created note
    GET    /api/notes/{id}   → 200 note
    PUT    /api/notes/{id}   → 200 updated note
    DELETE /api/notes/{id}   → 200 {"message": "Deleted successfully"}

Path ids are declared as plain strings so that a malformed id reaches the
service and is answered with 400 "Invalid ID" instead of FastAPI's 422.
"""

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.note import (
    ErrorResponse,
    MessageResponse,
    NoteCreate,
    NoteResponse,
)
from app.services.note_service import note_service
from app.services.note_store import SQLAlchemyNoteStore
from app.services.store_base import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])


def get_note_store(db: AsyncSession = Depends(get_db_session)) -> NoteStore:
    """
    FastAPI dependency providing the note store for one request.

    Override it with `app.dependency_overrides[get_note_store]` to run the
    API against another NoteStore.
    """
    return SQLAlchemyNoteStore(db)


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    responses={
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all notes",
    description="Returns every note, newest first. No pagination.",
)
async def list_notes(store: NoteStore = Depends(get_note_store)) -> List[NoteResponse]:
    return await note_service.list_notes(store)


@router.post(
    "/notes",
    status_code=201,
    response_model=NoteResponse,
    responses={
        400: {"description": "Title or content missing or blank", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a note",
    description="Both title and content are required and are stored trimmed.",
)
async def create_note(
    payload: Optional[NoteCreate] = None,
    store: NoteStore = Depends(get_note_store),
) -> NoteResponse:
    payload = payload or NoteCreate()
    return await note_service.create_note(store, title=payload.title, content=payload.content)


@router.get(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={
        400: {"description": "Malformed note id", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    store: NoteStore = Depends(get_note_store),
) -> NoteResponse:
    return await note_service.get_note(store, note_id)


@router.put(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={
        400: {"description": "Malformed id, malformed body or a blank field", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update a note",
    description=(
        "Partial update: only the fields present in the body change. "
        "If any present field is blank the whole update is rejected."
    ),
)
async def update_note(
    note_id: str,
    payload: Any = Body(default=None),
    store: NoteStore = Depends(get_note_store),
) -> NoteResponse:
    # Checked against NoteUpdate by the service, after the note is found
    return await note_service.update_note(store, note_id, payload)


@router.delete(
    "/notes/{note_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "Malformed note id", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    store: NoteStore = Depends(get_note_store),
) -> MessageResponse:
    message = await note_service.delete_note(store, note_id)
    return MessageResponse(message=message)
