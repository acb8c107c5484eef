# mdnotes/infrastructure/backup.py

from __future__ import annotations

from pathlib import Path

from mdnotes.errors import BackendIO
from mdnotes.infrastructure.filesystem import atomic_write_bytes
from mdnotes.logging_setup import log
from mdnotes.settings import BACKUP_SUFFIX


class BackupManager:
    """
    Single-generation snapshot taken right before a destructive overwrite.

    <file> is copied to <file>.bak, replacing any previous backup. If the
    copy cannot be made, BackendIO is raised and the caller must not write.
    """

    def __init__(self, suffix: str = BACKUP_SUFFIX):
        self.suffix = suffix

    def backup_path(self, path: Path) -> Path:
        path = Path(path)
        return path.with_name(path.name + self.suffix)

    def backup(self, path: Path) -> Path:
        path = Path(path)
        target = self.backup_path(path)

        try:
            data = path.read_bytes()
        except OSError as exc:
            log.error("Backup failed, cannot read %s: %s", path, exc)
            raise BackendIO("creating backup of", path, exc) from exc

        try:
            atomic_write_bytes(target, data)
        except OSError as exc:
            log.error("Backup failed, cannot write %s: %s", target, exc)
            raise BackendIO("writing backup", target, exc) from exc

        log.debug("Backup written: %s (%d bytes)", target, len(data))
        return target
