from __future__ import annotations

import shlex
import subprocess
import tempfile
from pathlib import Path

from mdnotes.errors import EditorError
from mdnotes.infrastructure.filesystem import read_text
from mdnotes.logging_setup import log
from mdnotes.settings import NOTE_SUFFIX


def edit_text(initial: str, editor: str) -> str:
    """
    Open *initial* in an external editor and return what the user saved.

    The text goes through a temporary file so the note itself is only ever
    written by the store.
    """
    cmd = shlex.split(editor)
    if not cmd:
        raise EditorError("No editor configured.")

    try:
        with tempfile.TemporaryDirectory(prefix="mdnotes-") as tmp:
            path = Path(tmp) / f"note{NOTE_SUFFIX}"
            path.write_text(initial, encoding="utf-8")

            log.debug("Launching editor: %s %s", editor, path)
            try:
                subprocess.run([*cmd, str(path)], check=True)
            except (OSError, subprocess.CalledProcessError) as exc:
                raise EditorError(f"Error opening the editor: {exc}") from exc

            return read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise EditorError(f"Error reading the edited note: {exc}") from exc
