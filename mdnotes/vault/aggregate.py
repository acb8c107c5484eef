from __future__ import annotations

import dataclasses
import json
from pathlib import Path

from mdnotes.core.filenames import note_stem, unique_identifier
from mdnotes.core.models import Note
from mdnotes.errors import BackendIO, EmptyContent, EmptyTitle, NotFound
from mdnotes.infrastructure.backup import BackupManager
from mdnotes.infrastructure.filesystem import atomic_write_text, read_text
from mdnotes.logging_setup import log


class JsonNoteStore:
    """
    Every note in one JSON document::

        {"notes": [{"title": ..., "content": ..., "identifier": ...}, ...]}

    The document is loaded once at construction and rewritten in full on
    every mutation, after the previous version has been backed up. A missing
    document is an empty collection.
    """

    def __init__(self, path: Path, backups: BackupManager | None = None):
        self.path = Path(path)
        self.backups = backups or BackupManager()
        self._notes: list[Note] = self._load()

    # ───────────────────────── persistence ─────────────────────────

    def _load(self) -> list[Note]:
        if not self.path.exists():
            log.info("No notes document at %s, starting empty", self.path)
            return []

        try:
            data = json.loads(read_text(self.path))
        except OSError as exc:
            raise BackendIO("reading", self.path, exc) from exc
        except UnicodeDecodeError as exc:
            raise BackendIO("decoding", self.path, exc) from exc
        except json.JSONDecodeError as exc:
            raise BackendIO("parsing", self.path, exc) from exc

        records = data.get("notes") if isinstance(data, dict) else None
        if not isinstance(records, list):
            raise BackendIO("parsing", self.path, ValueError("expected an object with a 'notes' list"))

        notes: list[Note] = []
        taken: set[str] = set()
        for rec in records:
            if not isinstance(rec, dict):
                raise BackendIO("parsing", self.path, ValueError(f"bad record: {rec!r}"))
            title = str(rec.get("title") or "")
            content = str(rec.get("content") or "")
            ident = rec.get("identifier")
            # older documents carry no identifier; duplicates are re-resolved
            if not isinstance(ident, str) or not ident or ident in taken:
                ident = unique_identifier(note_stem(title.strip()), taken)
            taken.add(ident)
            notes.append(Note(identifier=ident, title=title, content=content))

        log.debug("Loaded %d notes from %s", len(notes), self.path)
        return notes

    def _save(self, notes: list[Note]) -> None:
        payload = {
            "notes": [
                {"title": n.title, "content": n.content, "identifier": n.identifier}
                for n in notes
            ]
        }
        text = json.dumps(payload, ensure_ascii=False, indent=2) + "\n"

        if self.path.exists():
            self.backups.backup(self.path)

        try:
            atomic_write_text(self.path, text)
        except OSError as exc:
            raise BackendIO("writing", self.path, exc) from exc

    # ───────────────────────── public API ─────────────────────────

    def list(self) -> list[str]:
        return [n.identifier for n in self._notes]

    def titles(self) -> dict[str, str]:
        return {n.identifier: n.title for n in self._notes}

    def create(self, title: str, content: str) -> str:
        title = title.strip()
        if not title:
            raise EmptyTitle()

        ident = unique_identifier(note_stem(title), {n.identifier for n in self._notes})
        notes = [*self._notes, Note(identifier=ident, title=title, content=content)]
        self._save(notes)
        self._notes = notes

        log.info("Note created: title=%r identifier=%s document=%s", title, ident, self.path)
        return ident

    def _index_of(self, identifier: str) -> int | None:
        for i, note in enumerate(self._notes):
            if note.identifier == identifier:
                return i
        return None

    def get(self, identifier: str) -> Note:
        i = self._index_of(identifier)
        if i is None:
            raise NotFound(identifier)
        return self._notes[i]

    def read(self, title: str) -> str:
        i = self._index_of(note_stem(title.strip()))
        if i is None:
            raise NotFound(title)
        return self._notes[i].content

    def update(self, title: str, new_content: str) -> None:
        i = self._index_of(note_stem(title.strip()))
        if i is None:
            raise NotFound(title)
        if not new_content.strip():
            raise EmptyContent(title)

        notes = list(self._notes)
        notes[i] = dataclasses.replace(notes[i], content=new_content)
        self._save(notes)
        self._notes = notes

        log.info("Note updated: title=%r identifier=%s document=%s", title, notes[i].identifier, self.path)
