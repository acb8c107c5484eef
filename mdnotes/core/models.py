from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Note:
    identifier: str
    title: str
    content: str
