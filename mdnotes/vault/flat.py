from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from mdnotes.core.filenames import note_stem, unique_filename
from mdnotes.core.models import Note
from mdnotes.errors import BackendIO, EmptyContent, EmptyTitle, NotFound
from mdnotes.infrastructure.backup import BackupManager
from mdnotes.infrastructure.filesystem import atomic_write_text, read_text
from mdnotes.logging_setup import log
from mdnotes.settings import NOTE_SUFFIX


@dataclass(frozen=True)
class FlatNoteStore:
    """One note per ``<identifier>.md`` file inside *notes_dir*."""

    notes_dir: Path
    backups: BackupManager = field(default_factory=BackupManager)

    def ensure(self) -> None:
        try:
            self.notes_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise BackendIO("creating notes directory", self.notes_dir, exc) from exc

    def note_path(self, stem: str) -> Path:
        return self.notes_dir / f"{stem}{NOTE_SUFFIX}"

    def _note_files(self) -> list[Path]:
        if not self.notes_dir.exists():
            return []
        try:
            return [
                p for p in self.notes_dir.iterdir()
                if p.suffix == NOTE_SUFFIX and not p.name.startswith(".") and p.is_file()
            ]
        except OSError as exc:
            raise BackendIO("reading notes directory", self.notes_dir, exc) from exc

    def list(self) -> list[str]:
        return sorted((p.stem for p in self._note_files()), key=lambda s: (s.lower(), s))

    def titles(self) -> dict[str, str]:
        # no metadata on disk; the filename is all there is
        return {stem: stem for stem in self.list()}

    def create(self, title: str, content: str) -> str:
        title = title.strip()
        if not title:
            raise EmptyTitle()

        self.ensure()
        existing = {p.name for p in self._note_files()}
        filename = unique_filename(note_stem(title), existing)
        path = self.notes_dir / filename

        try:
            atomic_write_text(path, content)
        except OSError as exc:
            raise BackendIO("creating file", path, exc) from exc

        log.info("Note created: title=%r path=%s", title, path)
        return path.stem

    def _load(self, stem: str, title: str) -> str:
        path = self.note_path(stem)
        if not path.is_file():
            raise NotFound(title)
        try:
            return read_text(path)
        except OSError as exc:
            raise BackendIO("reading file", path, exc) from exc
        except UnicodeDecodeError as exc:
            raise BackendIO("decoding", path, exc) from exc

    def read(self, title: str) -> str:
        return self._load(note_stem(title.strip()), title)

    def get(self, identifier: str) -> Note:
        return Note(identifier=identifier, title=identifier, content=self._load(identifier, identifier))

    def update(self, title: str, new_content: str) -> None:
        path = self.note_path(note_stem(title.strip()))
        if not path.is_file():
            raise NotFound(title)
        if not new_content.strip():
            raise EmptyContent(title)

        # raises BackendIO; nothing is written past a failed backup
        self.backups.backup(path)

        try:
            atomic_write_text(path, new_content)
        except OSError as exc:
            raise BackendIO("saving the note", path, exc) from exc

        log.info("Note updated: title=%r path=%s", title, path)
