# mdnotes/core/filenames.py

from __future__ import annotations

import re
from collections.abc import Container

from mdnotes.settings import NOTE_SUFFIX, UNTITLED_STEM


DISALLOWED_CHARS_RE = re.compile(r"[^ A-Za-z0-9_-]")


def sanitize_title(title: str) -> str:
    """
    Convert a free-text note title into a filesystem-safe identifier.

    Every character outside [ A-Za-z0-9_-] is dropped, then spaces become
    underscores. Pure and idempotent; may return "".
    """
    return DISALLOWED_CHARS_RE.sub("", title).replace(" ", "_")


def note_stem(title: str) -> str:
    """Stem used on disk for *title*; an all-stripped title maps to a placeholder."""
    return sanitize_title(title) or UNTITLED_STEM


def unique_filename(base: str, existing_names: Container[str]) -> str:
    """
    Pick the first free name among base.md, base_1.md, base_2.md, ...

    Check-then-act: only valid while nobody else writes into the directory.
    """
    candidate = f"{base}{NOTE_SUFFIX}"
    counter = 1
    while candidate in existing_names:
        candidate = f"{base}_{counter}{NOTE_SUFFIX}"
        counter += 1
    return candidate


def unique_identifier(base: str, existing_ids: Container[str]) -> str:
    """Same suffix policy as :func:`unique_filename`, without the extension."""
    candidate = base
    counter = 1
    while candidate in existing_ids:
        candidate = f"{base}_{counter}"
        counter += 1
    return candidate
