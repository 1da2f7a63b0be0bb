"""
Repository for Note entities.

Handles data access for notes following the repository pattern. Every method
hands its work to the MongoDB driver and translates the driver result back
into notes or a success flag.
"""

import functools
import logging
import re
from datetime import datetime
from typing import List, Optional

from bson import ObjectId
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from core.constants import (
    FIELD_BODY,
    FIELD_CREATED_ON,
    FIELD_HEADER_IMAGE_SIZE,
    FIELD_ID,
    FIELD_MONGO_ID,
    FIELD_UPDATED_ON,
    FIELD_USER_ID,
)
from models.note import Note, utc_now
from persistence.note_context import NoteContext
from .base import BaseRepository

logger = logging.getLogger(__name__)

EMPTY_OBJECT_ID = ObjectId("0" * 24)


def to_internal_id(note_id: str) -> ObjectId:
    """Parse an ID as an ObjectId, falling back to the empty ObjectId."""
    if ObjectId.is_valid(note_id):
        return ObjectId(note_id)
    return EMPTY_OBJECT_ID


def _write_succeeded(acknowledged: bool, affected: int) -> bool:
    return acknowledged and affected > 0


def log_driver_errors(operation: str):
    """
    Decorator that logs driver failures and re-raises them unchanged.

    Args:
        operation: Description of the operation being performed
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except PyMongoError:
                logger.exception(f"MongoDB error while trying to {operation}")
                raise

        return wrapper
    return decorator


class NoteRepository(BaseRepository[Note]):
    """Abstract interface for Note repository."""

    async def search(
        self, body_text: str, updated_on: datetime, header_size_limit: int
    ) -> List[Note]:
        """
        Find notes by body text, update time and header image size.

        Args:
            body_text: Text the body must contain
            updated_on: Exact update timestamp to match
            header_size_limit: Largest header image size allowed

        Returns:
            Matching notes
        """
        raise NotImplementedError

    async def update_body(self, note_id: str, body: str) -> bool:
        """
        Set the body of a note and stamp its update time.

        Args:
            note_id: The note ID
            body: New body text

        Returns:
            True if a note was modified
        """
        raise NotImplementedError

    async def update_document(self, note_id: str, body: str) -> bool:
        """
        Update a note by rewriting the full document.

        Args:
            note_id: The note ID
            body: New body text

        Returns:
            True if an existing note was modified
        """
        raise NotImplementedError

    async def create_index(self) -> str:
        """
        Create the compound index on user ID and body.

        Returns:
            Name of the index
        """
        raise NotImplementedError


class MongoNoteRepository(NoteRepository):
    """
    MongoDB implementation of Note repository.

    Works on the notes collection of a NoteContext.
    """

    def __init__(self, context: NoteContext):
        """Initialize repository on top of a database context."""
        self.context = context

    @property
    def collection(self):
        return self.context.notes

    @log_driver_errors("add note")
    async def create(self, entity: Note) -> Note:
        """Insert a new note and return it with the database-assigned ID."""
        result = await self.collection.insert_one(entity.to_document())
        return entity.model_copy(update={"internal_id": str(result.inserted_id)})

    @log_driver_errors("list notes")
    async def list(self, limit: Optional[int] = None, offset: int = 0) -> List[Note]:
        """List notes ordered by creation time."""
        # limit=0 means no limit to the driver
        cursor = self.collection.find(
            {},
            sort=[(FIELD_CREATED_ON, ASCENDING)],
            skip=offset,
            limit=limit or 0,
        )
        documents = await cursor.to_list(length=None)
        return [Note.from_document(document) for document in documents]

    @log_driver_errors("get note")
    async def get(self, entity_id: str) -> Optional[Note]:
        """Get a note by its public ID or by its ObjectId."""
        document = await self.collection.find_one(
            {
                "$or": [
                    {FIELD_ID: entity_id},
                    {FIELD_MONGO_ID: to_internal_id(entity_id)},
                ]
            }
        )
        if document is None:
            return None
        return Note.from_document(document)

    @log_driver_errors("search notes")
    async def search(
        self, body_text: str, updated_on: datetime, header_size_limit: int
    ) -> List[Note]:
        """Find notes by body text, update time and header image size."""
        cursor = self.collection.find(
            {
                FIELD_BODY: {"$regex": re.escape(body_text)},
                FIELD_UPDATED_ON: updated_on,
                FIELD_HEADER_IMAGE_SIZE: {"$lte": header_size_limit},
            }
        )
        documents = await cursor.to_list(length=None)
        return [Note.from_document(document) for document in documents]

    @log_driver_errors("remove all notes")
    async def delete_all(self) -> bool:
        """Delete every note."""
        result = await self.collection.delete_many({})
        return _write_succeeded(result.acknowledged, result.deleted_count)

    @log_driver_errors("remove note")
    async def delete(self, entity_id: str) -> bool:
        """Delete a note by its public ID."""
        result = await self.collection.delete_one({FIELD_ID: entity_id})
        return _write_succeeded(result.acknowledged, result.deleted_count)

    @log_driver_errors("update note body")
    async def update_body(self, note_id: str, body: str) -> bool:
        """Set body and let the server stamp the update time."""
        result = await self.collection.update_one(
            {FIELD_ID: note_id},
            {
                "$set": {FIELD_BODY: body},
                "$currentDate": {FIELD_UPDATED_ON: True},
            },
        )
        return _write_succeeded(result.acknowledged, result.modified_count)

    @log_driver_errors("replace note")
    async def update(self, entity_id: str, entity: Note) -> bool:
        """Replace a note, inserting it when missing."""
        result = await self.collection.replace_one(
            {FIELD_ID: entity_id},
            entity.to_document(),
            upsert=True,
        )
        # An upsert that inserted reports no modification
        return _write_succeeded(result.acknowledged, result.modified_count)

    async def update_document(self, note_id: str, body: str) -> bool:
        """Read the note (or start a new one), change the body, write it back."""
        note = await self.get(note_id)
        if note is None:
            note = Note(id=note_id)

        note.body = body
        note.updated_on = utc_now()

        return await self.update(note_id, note)

    @log_driver_errors("create index")
    async def create_index(self) -> str:
        """Create the compound (user_id, body) index; existing index is reused."""
        return await self.collection.create_index(
            [(FIELD_USER_ID, ASCENDING), (FIELD_BODY, ASCENDING)]
        )

    @log_driver_errors("count notes")
    async def count(self) -> int:
        """Get total count of notes."""
        return await self.collection.count_documents({})
