"""
FastAPI dependencies for dependency injection.

Provides the database context, repository and service instances.
"""

from core.settings import Settings
from persistence import NoteContext
from repository import MongoNoteRepository, NoteRepository
from services import NoteService

# Shared instances; the client connects on first use
_settings = Settings.from_environment()
_note_context = NoteContext(_settings)
_note_repo = MongoNoteRepository(_note_context)
_note_service = NoteService(_note_repo, database_name=_settings.database)


def get_settings() -> Settings:
    """Get application settings."""
    return _settings


def get_note_context() -> NoteContext:
    """Get database context instance."""
    return _note_context


def get_note_repository() -> NoteRepository:
    """Get note repository instance."""
    return _note_repo


def get_note_service() -> NoteService:
    """Get note service instance."""
    return _note_service
