"""
Notes API - Note Service (Business Logic)
==========================================

What:  The five note operations: list, get, create, update, delete.
Why:   Keeps storage access and error classification out of the route
       handlers, which only translate results into envelopes.
How:   Each method runs against the AsyncSession it is given and either
       returns NoteResponse objects or raises an application exception.
Who:   Called by the handlers in app/routes/notes.py.

Transactions:
    Every write is committed here, before the method returns. The route
    handler builds its response only after the commit succeeded, so a
    success status is never sent for a write that did not persist.

Error Handling Strategy:
    - A missing row becomes NotFoundError.
    - IntegrityError on flush or commit (unique title) becomes ConflictError.
      The session is rolled back first so it stays usable.
    - Any other SQLAlchemyError is logged with the driver's message and
      re-raised as DatabaseError carrying a fixed, client-safe message.

NoteService is stateless: it receives the db session for each call, so a
single module-level instance is shared by all requests.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError, DatabaseError, NotFoundError
from app.models.note import Note
from app.schemas.note import CreateNoteSchema, NoteResponse, UpdateNoteSchema

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes():  every stored note
        - get_note():    single note with not-found handling
        - create_note(): insert with unique-title conflict detection
        - update_note(): partial update of the supplied fields
        - delete_note(): hard delete with not-found handling
    """

    async def list_notes(
        self,
        db: AsyncSession,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[NoteResponse]:
        """
        Return every note in the store's natural order.

        `page` and `limit` are accepted but not applied to the query.

        Raises:
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(select(Note))
            notes = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Something bad happened while fetching all note items",
                context={"error_type": type(e).__name__, "original_error": str(e)},
            )

        logger.debug("Listed %d notes (page=%s, limit=%s ignored)", len(notes), page, limit)
        return [NoteResponse.model_validate(note) for note in notes]

    async def get_note(self, db: AsyncSession, note_id: UUID) -> NoteResponse:
        """
        Retrieve a single note by ID.

        Raises:
            NotFoundError: Note with given ID does not exist (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        note = await self._fetch(
            db,
            note_id,
            error_message="Something went wrong while fetching the note",
        )
        if note is None:
            raise NotFoundError(resource="Note", resource_id=str(note_id))

        return NoteResponse.model_validate(note)

    async def create_note(self, db: AsyncSession, data: CreateNoteSchema) -> NoteResponse:
        """
        Insert a new note and return it with its generated id and timestamps.

        `published` is written when supplied; otherwise the column default
        (false) applies.

        Raises:
            ConflictError: A note with the same title already exists (→ 409)
            DatabaseError: Insert failed for any other reason (→ 500)
        """
        note = Note(
            title=data.title,
            content=data.content,
            category=data.category,
        )
        if data.published is not None:
            note.published = data.published

        db.add(note)
        try:
            # flush surfaces the unique-title violation on the INSERT itself;
            # refresh loads the id and server-side timestamps.
            await db.flush()
            await db.refresh(note)
            await db.commit()
        except IntegrityError as e:
            # The failed INSERT leaves the transaction aborted until rollback.
            await db.rollback()
            logger.info("Rejected duplicate note title %r: %s", data.title, str(e.orig))
            raise ConflictError(field="title", context={"title": data.title})
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to create the note",
                context={"error_type": type(e).__name__, "original_error": str(e)},
            )

        logger.info("Note created: %s", note.id)
        return NoteResponse.model_validate(note)

    async def update_note(
        self,
        db: AsyncSession,
        note_id: UUID,
        data: UpdateNoteSchema,
    ) -> NoteResponse:
        """
        Overwrite the fields present in `data`; leave the rest untouched.

        A field sent as null counts as absent, so category and published
        cannot be cleared through this operation.

        Raises:
            NotFoundError: Note with given ID does not exist (→ 404)
            ConflictError: New title is already used by another note (→ 409)
            DatabaseError: Fetch or write failed (→ 500)
        """
        note = await self._fetch(
            db,
            note_id,
            error_message=f"Error while fetching the note with ID: {note_id}",
        )
        if note is None:
            raise NotFoundError(resource="Note", resource_id=str(note_id))

        changes = data.model_dump(exclude_none=True)
        for field, value in changes.items():
            setattr(note, field, value)

        try:
            await db.flush()
            # Picks up updated_at as written by the onupdate hook.
            await db.refresh(note)
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.info("Rejected rename of note %s to a taken title: %s", note_id, str(e.orig))
            raise ConflictError(field="title", context={"note_id": str(note_id)})
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error updating note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to update the note",
                context={"note_id": str(note_id), "original_error": str(e)},
            )

        logger.info("Note %s updated: %s", note_id, sorted(changes))
        return NoteResponse.model_validate(note)

    async def delete_note(self, db: AsyncSession, note_id: UUID) -> None:
        """
        Hard-delete a note.

        Raises:
            NotFoundError: No row had this ID (→ 404)
            DatabaseError: Delete statement failed (→ 500)
        """
        # One DELETE statement; its rowcount tells a missing note apart
        # from a deleted one. Committing a zero-row delete is a no-op.
        try:
            result = await db.execute(delete(Note).where(Note.id == note_id))
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error deleting note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Failed to delete note with ID: {note_id}",
                context={"note_id": str(note_id), "original_error": str(e)},
            )

        if result.rowcount == 0:
            raise NotFoundError(resource="Note", resource_id=str(note_id))

        logger.info("Note deleted: %s", note_id)

    async def _fetch(
        self,
        db: AsyncSession,
        note_id: UUID,
        error_message: str,
    ) -> Optional[Note]:
        """Primary-key lookup; returns None when the note does not exist."""
        try:
            result = await db.execute(select(Note).where(Note.id == note_id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message=error_message,
                context={"note_id": str(note_id), "original_error": str(e)},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
