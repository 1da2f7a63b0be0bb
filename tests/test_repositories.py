"""
Unit tests for repository implementations.

Runs the MongoDB note repository against an in-process mock database.
"""

import logging
import pytest
import pytest_asyncio
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from bson import ObjectId
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import PyMongoError

# Import our repositories
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from core.settings import Settings
from persistence import NoteContext
from repository import MongoNoteRepository, to_internal_id
from models.note import Note, NoteImage


@pytest_asyncio.fixture
async def repo():
    """Repository backed by a fresh mock database."""
    context = NoteContext(Settings(database="NotesTestDb"), client=AsyncMongoMockClient())
    return MongoNoteRepository(context)


def make_note(note_id: str, body: str = "Body", user_id: int = 1, **kwargs) -> Note:
    return Note(id=note_id, body=body, user_id=user_id, **kwargs)


class TestInternalId:
    """Test ObjectId parsing."""

    def test_valid_object_id(self):
        object_id = ObjectId()
        assert to_internal_id(str(object_id)) == object_id

    def test_invalid_object_id_falls_back_to_empty(self):
        assert to_internal_id("1") == ObjectId("000000000000000000000000")
        assert to_internal_id("not-an-object-id") == ObjectId("0" * 24)


class TestMongoNoteRepository:
    """Test MongoNoteRepository implementation."""

    @pytest.mark.asyncio
    async def test_create_and_get_note(self, repo):
        """Test creating and retrieving a note by public ID."""
        note = make_note("1", "Test note 1")

        created = await repo.create(note)
        assert created.id == "1"

        retrieved = await repo.get("1")
        assert retrieved is not None
        assert retrieved.body == "Test note 1"
        assert retrieved.internal_id is not None

    @pytest.mark.asyncio
    async def test_create_returns_database_assigned_id(self, repo):
        """Test the created note carries the ObjectId the database assigned."""
        note = make_note("1", "Test note 1")

        created = await repo.create(note)

        stored = await repo.get("1")
        assert created.internal_id is not None
        assert created.internal_id == stored.internal_id
        # The caller's instance is not modified
        assert note.internal_id is None

    @pytest.mark.asyncio
    async def test_get_by_internal_id(self, repo):
        """Test a note can be found by its ObjectId string."""
        await repo.create(make_note("1"))
        stored = await repo.get("1")

        retrieved = await repo.get(stored.internal_id)

        assert retrieved is not None
        assert retrieved.id == "1"

    @pytest.mark.asyncio
    async def test_get_missing_note_returns_none(self, repo):
        assert await repo.get("missing") is None
        assert await repo.get(str(ObjectId())) is None

    @pytest.mark.asyncio
    async def test_list_notes_with_pagination(self, repo):
        """Test listing orders by creation time and applies skip/limit."""
        for i in range(5):
            await repo.create(
                make_note(str(i), created_on=datetime(2024, 1, 1, 10, i))
            )

        all_notes = await repo.list()
        assert [n.id for n in all_notes] == ["0", "1", "2", "3", "4"]

        limited = await repo.list(limit=2)
        assert [n.id for n in limited] == ["0", "1"]

        offset_notes = await repo.list(offset=3)
        assert [n.id for n in offset_notes] == ["3", "4"]

        paginated = await repo.list(limit=2, offset=2)
        assert [n.id for n in paginated] == ["2", "3"]

        assert await repo.count() == 5

    @pytest.mark.asyncio
    async def test_search_notes(self, repo):
        """Test search matches body text, exact update time and image size."""
        stamp = datetime(2024, 5, 1, 12, 0)
        other_stamp = datetime(2024, 5, 2, 12, 0)

        await repo.create(make_note("1", "shopping list", updated_on=stamp,
                                    header_image=NoteImage(image_size=100)))
        await repo.create(make_note("2", "shopping cart", updated_on=stamp,
                                    header_image=NoteImage(image_size=5000)))
        await repo.create(make_note("3", "shopping again", updated_on=other_stamp,
                                    header_image=NoteImage(image_size=100)))
        await repo.create(make_note("4", "travel plans", updated_on=stamp,
                                    header_image=NoteImage(image_size=100)))
        await repo.create(make_note("5", "shopping, no image", updated_on=stamp))

        results = await repo.search("shopping", stamp, 1000)

        assert [n.id for n in results] == ["1"]

    @pytest.mark.asyncio
    async def test_search_treats_text_literally(self, repo):
        """Test regex metacharacters in the search text are escaped."""
        stamp = datetime(2024, 5, 1, 12, 0)
        await repo.create(make_note("1", "cost (approx.) 5$", updated_on=stamp,
                                    header_image=NoteImage(image_size=1)))
        await repo.create(make_note("2", "cost approx 5", updated_on=stamp,
                                    header_image=NoteImage(image_size=1)))

        results = await repo.search("(approx.)", stamp, 10)

        assert [n.id for n in results] == ["1"]

    @pytest.mark.asyncio
    async def test_delete_note(self, repo):
        """Test deleting a note reports success only when something was removed."""
        await repo.create(make_note("1"))

        assert await repo.delete("1") is True
        assert await repo.get("1") is None
        assert await repo.delete("1") is False

    @pytest.mark.asyncio
    async def test_delete_all_notes(self, repo):
        await repo.create(make_note("1"))
        await repo.create(make_note("2"))

        assert await repo.delete_all() is True
        assert await repo.count() == 0

        # Nothing left to delete
        assert await repo.delete_all() is False

    @pytest.mark.asyncio
    async def test_update_body_sets_current_date(self, repo):
        """Test body update also refreshes the update timestamp."""
        old_stamp = datetime(2020, 1, 1)
        await repo.create(make_note("1", "old", updated_on=old_stamp))

        assert await repo.update_body("1", "new") is True

        updated = await repo.get("1")
        assert updated.body == "new"
        assert updated.updated_on > old_stamp

    @pytest.mark.asyncio
    async def test_update_body_missing_note(self, repo):
        assert await repo.update_body("missing", "new") is False

    @pytest.mark.asyncio
    async def test_update_body_unchanged_text_still_modifies(self, repo):
        """Test rewriting the same body counts as a change through the update time."""
        await repo.create(make_note("1", "same", updated_on=datetime(2020, 1, 1)))

        assert await repo.update_body("1", "same") is True

    @pytest.mark.asyncio
    async def test_replace_existing_note(self, repo):
        """Test full replacement keeps the stored ObjectId."""
        await repo.create(make_note("1", "old", user_id=1))
        original = await repo.get("1")

        replacement = make_note("1", "replaced", user_id=9)
        assert await repo.update("1", replacement) is True

        stored = await repo.get("1")
        assert stored.body == "replaced"
        assert stored.user_id == 9
        assert stored.internal_id == original.internal_id

    @pytest.mark.asyncio
    async def test_replace_missing_note_upserts(self, repo):
        """Test replacing a missing note inserts it but reports no modification."""
        result = await repo.update("new", make_note("new", "inserted"))

        assert result is False
        stored = await repo.get("new")
        assert stored is not None
        assert stored.body == "inserted"

    @pytest.mark.asyncio
    async def test_update_document_existing_note(self, repo):
        old_stamp = datetime(2020, 1, 1)
        await repo.create(make_note("1", "old", user_id=4, updated_on=old_stamp))

        assert await repo.update_document("1", "rewritten") is True

        stored = await repo.get("1")
        assert stored.body == "rewritten"
        assert stored.user_id == 4
        assert stored.updated_on > old_stamp

    @pytest.mark.asyncio
    async def test_update_document_missing_note(self, repo):
        """Test a missing note is written as a fresh document."""
        assert await repo.update_document("fresh", "hello") is False

        stored = await repo.get("fresh")
        assert stored is not None
        assert stored.body == "hello"
        assert stored.user_id == 0

    @pytest.mark.asyncio
    async def test_create_index(self, repo):
        """Test index creation returns the same name when repeated."""
        name = await repo.create_index()
        assert name == "user_id_1_body_1"

        assert await repo.create_index() == name


class TestRepositoryErrors:
    """Test driver failures propagate unchanged."""

    @pytest.mark.asyncio
    async def test_driver_error_is_logged_and_reraised(self, caplog):
        error = PyMongoError("connection refused")
        context = MagicMock()
        context.notes.insert_one = AsyncMock(side_effect=error)
        repo = MongoNoteRepository(context)

        with caplog.at_level(logging.ERROR, logger="repository.note_repository"):
            with pytest.raises(PyMongoError) as exc_info:
                await repo.create(make_note("1"))

        assert exc_info.value is error
        assert "add note" in caplog.text

    @pytest.mark.asyncio
    async def test_non_driver_error_is_not_logged(self, caplog):
        context = MagicMock()
        context.notes.delete_one = AsyncMock(side_effect=RuntimeError("bug"))
        repo = MongoNoteRepository(context)

        with caplog.at_level(logging.ERROR, logger="repository.note_repository"):
            with pytest.raises(RuntimeError):
                await repo.delete("1")

        assert caplog.text == ""
