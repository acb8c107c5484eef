from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

APP_NAME = "mdnotes"
LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

NOTES_DIR_NAME = "notes"
NOTES_FILE_NAME = "notes.json"
NOTE_SUFFIX = ".md"
BACKUP_SUFFIX = ".bak"
PREVIEW_FILE_NAME = "preview.html"

UNTITLED_STEM = "Untitled"

DEFAULT_EDITOR = "nano"

BACKENDS = ("flat", "json")


def default_editor() -> str:
    return os.environ.get("EDITOR") or DEFAULT_EDITOR


@dataclass(frozen=True)
class StoreConfig:
    """Where the notes live and which backend owns them."""

    root: Path
    backend: str = "flat"

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ValueError(f"unknown backend: {self.backend!r} (expected one of {', '.join(BACKENDS)})")
        object.__setattr__(self, "root", Path(self.root))

    @property
    def notes_dir(self) -> Path:
        return self.root / NOTES_DIR_NAME

    @property
    def notes_file(self) -> Path:
        return self.root / NOTES_FILE_NAME

    @property
    def preview_path(self) -> Path:
        return self.root / PREVIEW_FILE_NAME
