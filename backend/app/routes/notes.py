"""
Notes API - Notes Route Handlers
=================================

What:  The five CRUD endpoints under /api/notes.
How:   Each handler validates its input through FastAPI, makes one
       NoteService call and wraps the result in a success envelope.
       Failures are raised by the service and rendered by the global
       exception handlers in main.py.

Route Inventory:
    GET    /api/notes          list every note
    POST   /api/notes          create a note          (201)
    GET    /api/notes/{id}     fetch one note
    PUT    /api/notes/{id}     partially update a note
    DELETE /api/notes/{id}     delete a note          (204)
"""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.note import (
    CreateNoteSchema,
    ErrorEnvelope,
    FilterOptions,
    NoteData,
    NoteEnvelope,
    NoteListEnvelope,
    UpdateNoteSchema,
)
from app.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])

_NOT_FOUND = {404: {"description": "Note not found", "model": ErrorEnvelope}}
_CONFLICT = {409: {"description": "Title already in use", "model": ErrorEnvelope}}
_SERVER_ERROR = {500: {"description": "Server error", "model": ErrorEnvelope}}


@router.get(
    "/notes",
    response_model=NoteListEnvelope,
    response_model_exclude_unset=True,
    responses={**_SERVER_ERROR},
    summary="List all notes",
)
async def list_notes(
    opts: Annotated[FilterOptions, Query()],
    db: AsyncSession = Depends(get_db_session),
) -> NoteListEnvelope:
    """
    Returns every note. `page` and `limit` are accepted but not applied.

    An empty store answers with results=0 and a "No notes found" message
    instead of an empty data list.
    """
    notes = await note_service.list_notes(db=db, page=opts.page, limit=opts.limit)

    # exclude_unset drops whichever of data/message was not given; status is
    # passed explicitly so it is kept. Null note fields stay in each item.
    if not notes:
        return NoteListEnvelope(status="success", results=0, message="No notes found")
    return NoteListEnvelope(status="success", results=len(notes), data=notes)


@router.post(
    "/notes",
    response_model=NoteEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={**_CONFLICT, **_SERVER_ERROR},
    summary="Create a note",
)
async def create_note(
    body: CreateNoteSchema,
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    note = await note_service.create_note(db=db, data=body)
    return NoteEnvelope(data=NoteData(note=note))


@router.get(
    "/notes/{note_id}",
    response_model=NoteEnvelope,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Get a single note by ID",
)
async def get_note(
    note_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    """
    Args:
        note_id: UUID path parameter. Malformed values are rejected by
                 FastAPI with a 422 envelope before this handler runs.
    """
    note = await note_service.get_note(db=db, note_id=note_id)
    return NoteEnvelope(data=NoteData(note=note))


@router.put(
    "/notes/{note_id}",
    response_model=NoteEnvelope,
    responses={**_NOT_FOUND, **_CONFLICT, **_SERVER_ERROR},
    summary="Update a note",
)
async def update_note(
    note_id: UUID,
    body: UpdateNoteSchema,
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    """Only the fields present in the body are changed."""
    note = await note_service.update_note(db=db, note_id=note_id, data=body)
    return NoteEnvelope(data=NoteData(note=note))


@router.delete(
    "/notes/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Delete a note",
)
async def delete_note(
    note_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await note_service.delete_note(db=db, note_id=note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
