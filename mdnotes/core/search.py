# mdnotes/core/search.py

from __future__ import annotations

from mdnotes.errors import BackendIO, NotFound
from mdnotes.logging_setup import log
from mdnotes.vault.base import NoteStore


class SearchEngine:
    """
    Linear scan over a store's listing.

    Both queries return identifiers in listing order; no match is an empty
    list, a broken store raises BackendIO.
    """

    def __init__(self, store: NoteStore):
        self.store = store

    def search_by_title(self, query: str) -> list[str]:
        """Match against the identifier and, where the backend keeps it, the original title."""
        q = query.lower()
        return [
            ident for ident, title in self.store.titles().items()
            if q in ident.lower() or q in title.lower()
        ]

    def search_by_content(self, query: str) -> list[str]:
        q = query.lower()
        found: list[str] = []
        for ident in self.store.list():
            try:
                note = self.store.get(ident)
            except (BackendIO, NotFound) as exc:
                # one unreadable note must not hide the others
                log.warning("Search skipped note %s: %s", ident, exc)
                continue
            if q in note.content.lower():
                found.append(ident)
        return found
