"""
System API endpoints.

Seeds the notes collection and manages its index.
"""

from fastapi import APIRouter, Depends, status

from services.note_service import NoteService
from core.error_handlers import handle_service_exceptions
from .dependencies import get_note_service

router = APIRouter(prefix="/api/system", tags=["system"])


@router.get(
    "/init",
    summary="Initialize sample data",
)
@handle_service_exceptions("initialize sample data")
async def initialize_sample_data(
    note_service: NoteService = Depends(get_note_service),
) -> dict:
    """
    Remove all notes, create the compound index and insert sample notes.

    Existing data is lost.
    """
    message = await note_service.initialize_sample_data()
    return {"message": message}


@router.post(
    "/indexes",
    status_code=status.HTTP_201_CREATED,
    summary="Create notes index",
)
@handle_service_exceptions("create index")
async def create_index(
    note_service: NoteService = Depends(get_note_service),
) -> dict:
    """
    Create the compound index on user ID and body.

    Calling it again returns the name of the existing index.
    """
    index_name = await note_service.create_index()
    return {"index_name": index_name}
