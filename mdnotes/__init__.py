"""Personal Markdown note manager."""

from mdnotes.core import Note, sanitize_title, unique_filename
from mdnotes.core.search import SearchEngine
from mdnotes.errors import BackendIO, EmptyContent, EmptyTitle, NoteError, NotFound, RenderFailure
from mdnotes.infrastructure.backup import BackupManager
from mdnotes.settings import StoreConfig
from mdnotes.vault import FlatNoteStore, JsonNoteStore, NoteStore, open_store

__all__ = [
    "Note",
    "sanitize_title",
    "unique_filename",
    "SearchEngine",
    "NoteError",
    "EmptyTitle",
    "EmptyContent",
    "NotFound",
    "BackendIO",
    "RenderFailure",
    "BackupManager",
    "StoreConfig",
    "NoteStore",
    "FlatNoteStore",
    "JsonNoteStore",
    "open_store",
]
