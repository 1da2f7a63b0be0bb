"""
Persistence module for the notebook API.

Owns the MongoDB client and the notes collection.
"""

from .note_context import NoteContext

__all__ = ["NoteContext"]
