"""
Notebook API - Pydantic Models

This module contains the data models used throughout the notebook API.
"""

from .note import Note, NoteBase, NoteBodyUpdate, NoteCreate, NoteImage
from .pagination import PaginatedResponse, PaginationParams

__all__ = [
    "Note",
    "NoteBase",
    "NoteBodyUpdate",
    "NoteCreate",
    "NoteImage",
    "PaginatedResponse",
    "PaginationParams",
]
