# app/notesdb/__init__.py
"""Shared data-access layer for the notes Lambda functions."""
from .errors import MissingTableNameError, NotesError, RepositoryError, ValidationError
from .models import GetAllNotesResponse, Note
from .repository import TABLE_QUERY_LIMIT, TABLE_SCAN_LIMIT, NoteRepository

__all__ = [
    "GetAllNotesResponse",
    "MissingTableNameError",
    "Note",
    "NoteRepository",
    "NotesError",
    "RepositoryError",
    "TABLE_QUERY_LIMIT",
    "TABLE_SCAN_LIMIT",
    "ValidationError",
]
