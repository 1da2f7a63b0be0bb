"""
Note service for business logic.

Thin orchestration between the API routers and the note repository.
"""

import logging
from datetime import datetime
from typing import List, Tuple
from uuid import uuid4

from core.constants import (
    NOTES_COLLECTION_NAME,
    SAMPLE_NOTES,
    SUCCESS_SAMPLE_DATA_CREATED,
)
from models.note import Note, NoteCreate, utc_now
from models.pagination import PaginationParams
from repository import NoteRepository, NotFoundError

logger = logging.getLogger(__name__)


class NoteService:
    """
    Service for note operations.

    Generates identifiers and timestamps for new notes and seeds sample data.
    """

    def __init__(self, note_repo: NoteRepository, database_name: str = ""):
        """
        Initialize note service.

        Args:
            note_repo: Note repository instance
            database_name: Database name reported by the sample-data summary
        """
        self.note_repo = note_repo
        self.database_name = database_name

    async def list_notes(self, params: PaginationParams) -> Tuple[List[Note], int]:
        """List one page of notes together with the total count."""
        notes = await self.note_repo.list(limit=params.limit, offset=params.offset)
        total = await self.note_repo.count()
        return notes, total

    async def get_note(self, note_id: str) -> Note:
        """
        Get a note by public ID or ObjectId.

        Raises:
            NotFoundError: If no note matches
        """
        note = await self.note_repo.get(note_id)
        if note is None:
            raise NotFoundError("Note", note_id)
        return note

    async def create_note(self, note_data: NoteCreate) -> Note:
        """Create a note, generating an ID when the caller did not supply one."""
        now = utc_now()
        note = Note(
            id=note_data.id or uuid4().hex,
            body=note_data.body,
            user_id=note_data.user_id,
            header_image=note_data.header_image,
            created_on=now,
            updated_on=now,
        )
        return await self.note_repo.create(note)

    async def search_notes(
        self, body_text: str, updated_on: datetime, header_size_limit: int
    ) -> List[Note]:
        return await self.note_repo.search(body_text, updated_on, header_size_limit)

    async def update_note_body(self, note_id: str, body: str) -> bool:
        return await self.note_repo.update_body(note_id, body)

    async def update_note_document(self, note_id: str, body: str) -> bool:
        return await self.note_repo.update_document(note_id, body)

    async def delete_note(self, note_id: str) -> bool:
        return await self.note_repo.delete(note_id)

    async def delete_all_notes(self) -> bool:
        return await self.note_repo.delete_all()

    async def create_index(self) -> str:
        return await self.note_repo.create_index()

    async def initialize_sample_data(self) -> str:
        """
        Reset the collection to a small set of sample notes.

        Removes every note, creates the compound index and inserts the
        sample notes.

        Returns:
            Summary message naming the index that was created
        """
        await self.note_repo.delete_all()
        index_name = await self.note_repo.create_index()

        for note_id, body, user_id in SAMPLE_NOTES:
            await self.note_repo.create(
                Note(id=note_id, body=body, user_id=user_id, updated_on=utc_now())
            )

        logger.info(f"Seeded {len(SAMPLE_NOTES)} sample notes, index {index_name}")
        return SUCCESS_SAMPLE_DATA_CREATED.format(
            database=self.database_name,
            collection=NOTES_COLLECTION_NAME,
            count=len(SAMPLE_NOTES),
            index_name=index_name,
        )
