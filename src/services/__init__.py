"""
Service layer for the Notebook API.

This module implements business logic and orchestration,
following Domain-Driven Design principles.
"""

from .note_service import NoteService

__all__ = [
    "NoteService",
]
