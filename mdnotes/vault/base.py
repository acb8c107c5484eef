"""Storage contract shared by every note backend."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from mdnotes.core.models import Note


@runtime_checkable
class NoteStore(Protocol):
    """Common interface of the flat-file and aggregate-file backends.

    Titles are resolved to identifiers with the same sanitizer on every
    backend, so callers never need to know which one they hold.
    """

    def create(self, title: str, content: str) -> str:
        """Persist a new note and return its unique identifier."""
        ...

    def read(self, title: str) -> str:
        """Return the body of the note *title* resolves to, or raise NotFound."""
        ...

    def update(self, title: str, new_content: str) -> None:
        """Back up, then overwrite the body of an existing note."""
        ...

    def list(self) -> list[str]:
        """Return every identifier, in the backend's stable order."""
        ...

    def titles(self) -> dict[str, str]:
        """Map every identifier to its stored title, in listing order."""
        ...

    def get(self, identifier: str) -> Note:
        """Fetch a full note by identifier, or raise NotFound."""
        ...
