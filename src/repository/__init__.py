"""
Repository layer for the Notebook API.

This module implements the repository pattern for data access,
following Domain-Driven Design principles.
"""

from .base import BaseRepository, RepositoryException, NotFoundError
from .note_repository import MongoNoteRepository, NoteRepository, to_internal_id

__all__ = [
    "BaseRepository",
    "RepositoryException",
    "NotFoundError",
    "MongoNoteRepository",
    "NoteRepository",
    "to_internal_id",
]
