"""
Note API endpoints.

Handles CRUD operations and search for notes.
"""

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, status, Query
from fastapi.responses import Response

from models.note import Note, NoteBodyUpdate, NoteCreate
from models.pagination import PaginatedResponse, PaginationParams
from services.note_service import NoteService
from core.constants import DEFAULT_PAGE_LIMIT, DEFAULT_PAGE_OFFSET, MAX_PAGE_LIMIT
from core.error_handlers import (
    create_not_found_exception,
    handle_service_exceptions,
    validate_non_negative_integer,
)
from .dependencies import get_note_service

router = APIRouter(prefix="/api/notes", tags=["notes"])


@router.get(
    "",
    response_model=PaginatedResponse[Note],
    summary="List notes",
)
@handle_service_exceptions("list notes", "note")
async def list_notes(
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT, description="Maximum number of items to return"),
    offset: int = Query(DEFAULT_PAGE_OFFSET, ge=0, description="Number of items to skip"),
    note_service: NoteService = Depends(get_note_service),
) -> PaginatedResponse[Note]:
    """
    List notes ordered by creation time.

    - **limit**: Maximum number of notes to return (1-100, default 25)
    - **offset**: Number of notes to skip (default 0)
    """
    params = PaginationParams(limit=limit, offset=offset)
    notes, total = await note_service.list_notes(params)
    return PaginatedResponse[Note].from_page(notes, total, params)


@router.get(
    "/search",
    response_model=List[Note],
    summary="Search notes",
)
@handle_service_exceptions("search notes", "note")
async def search_notes(
    body_text: str = Query(..., description="Text the note body must contain"),
    updated_on: datetime = Query(..., description="Exact update timestamp"),
    header_size_limit: int = Query(..., description="Largest header image size in bytes"),
    note_service: NoteService = Depends(get_note_service),
) -> List[Note]:
    """
    Find notes whose body contains the text, updated at the given time,
    with a header image no larger than the limit.
    """
    validate_non_negative_integer(header_size_limit, "header_size_limit")
    return await note_service.search_notes(body_text, updated_on, header_size_limit)


@router.get(
    "/{note_id}",
    response_model=Note,
    summary="Get note",
)
@handle_service_exceptions("get note", "note")
async def get_note(
    note_id: str,
    note_service: NoteService = Depends(get_note_service),
) -> Note:
    """Get a note by its ID or its database ObjectId."""
    return await note_service.get_note(note_id)


@router.post(
    "",
    response_model=Note,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new note",
)
@handle_service_exceptions("create note", "note")
async def create_note(
    note_data: NoteCreate,
    note_service: NoteService = Depends(get_note_service),
) -> Note:
    """
    Create a new note.

    - **id**: Optional public ID, generated when omitted
    - **body**: Note text
    - **user_id**: Owning user
    """
    return await note_service.create_note(note_data)


@router.put(
    "/{note_id}",
    summary="Update note body",
)
@handle_service_exceptions("update note", "note")
async def update_note(
    note_id: str,
    note_data: NoteBodyUpdate,
    note_service: NoteService = Depends(get_note_service),
) -> dict:
    """
    Replace the body of a note; the update time is set by the database.
    """
    updated = await note_service.update_note_body(note_id, note_data.body)
    if not updated:
        raise create_not_found_exception("note", note_id)
    return {"id": note_id, "updated": True}


@router.put(
    "/{note_id}/document",
    summary="Rewrite full note document",
)
@handle_service_exceptions("update note document", "note")
async def update_note_document(
    note_id: str,
    note_data: NoteBodyUpdate,
    note_service: NoteService = Depends(get_note_service),
) -> dict:
    """
    Read the note, change its body and write the whole document back.

    A missing note is inserted; `updated` is false in that case.
    """
    updated = await note_service.update_note_document(note_id, note_data.body)
    return {"id": note_id, "updated": updated}


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete note",
)
@handle_service_exceptions("delete note", "note")
async def delete_note(
    note_id: str,
    note_service: NoteService = Depends(get_note_service),
) -> Response:
    """Delete a note. This operation is irreversible."""
    deleted = await note_service.delete_note(note_id)
    if not deleted:
        raise create_not_found_exception("note", note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "",
    summary="Delete all notes",
)
@handle_service_exceptions("delete all notes", "note")
async def delete_all_notes(
    note_service: NoteService = Depends(get_note_service),
) -> dict:
    """Delete every note. This operation is irreversible."""
    deleted = await note_service.delete_all_notes()
    return {"deleted": deleted}
