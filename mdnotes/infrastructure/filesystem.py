# mdnotes/infrastructure/filesystem.py

from __future__ import annotations

import os
import uuid
from pathlib import Path


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """
    Atomic-ish file write:
    - write to temp file in same directory
    - fsync
    - replace()

    Prevents partial writes on crash/power loss.
    """
    path = Path(path)
    parent = path.parent
    parent.mkdir(parents=True, exist_ok=True)

    tmp_name = f".{path.name}.tmp-{uuid.uuid4().hex}"
    tmp_path = parent / tmp_name

    try:
        with open(tmp_path, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()


def atomic_write_text(
    path: Path,
    text: str,
    *,
    encoding: str = "utf-8",
) -> None:
    atomic_write_bytes(path, text.encode(encoding))


def read_text(path: Path, *, encoding: str = "utf-8") -> str:
    """Single read path for note bodies; keeps line endings verbatim."""
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()
