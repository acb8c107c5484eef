from __future__ import annotations

from mdnotes.infrastructure.backup import BackupManager
from mdnotes.settings import StoreConfig

from .aggregate import JsonNoteStore
from .base import NoteStore
from .flat import FlatNoteStore


def open_store(config: StoreConfig, *, backups: BackupManager | None = None) -> NoteStore:
    """Build the backend *config* selects, rooted at ``config.root``."""
    backups = backups or BackupManager()
    if config.backend == "json":
        return JsonNoteStore(config.notes_file, backups)
    return FlatNoteStore(config.notes_dir, backups)


__all__ = ["NoteStore",
           "FlatNoteStore",
           "JsonNoteStore",
           "open_store"
           ]
