"""Pydantic schemas for note endpoints.

Field names follow the wire format of the HTTP API (note_title,
noteId, noteIdToDelete).
"""

from .note import AddNoteRequest, DeleteNoteRequest, EditNoteRequest, NoteFields, NoteResponse

__all__ = [
    "AddNoteRequest",
    "DeleteNoteRequest",
    "EditNoteRequest",
    "NoteFields",
    "NoteResponse",
]
