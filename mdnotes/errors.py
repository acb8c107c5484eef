"""Error taxonomy shared by the stores, the renderer and the shell."""

from __future__ import annotations


class NoteError(Exception):
    """Base class for every error the note manager reports to the user."""


class EmptyTitle(NoteError):
    def __init__(self) -> None:
        super().__init__("Title cannot be empty.")


class EmptyContent(NoteError):
    def __init__(self, title: str) -> None:
        super().__init__(f"Cannot save an empty note '{title}'. Changes discarded.")
        self.title = title


class NotFound(NoteError):
    def __init__(self, title: str) -> None:
        super().__init__(f"The note '{title}' does not exist.")
        self.title = title


class BackendIO(NoteError):
    """Storage could not be read or written; ``__cause__`` holds the OS error."""

    def __init__(self, action: str, path, cause: BaseException | None = None) -> None:
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Error {action} {path}{detail}")
        self.action = action
        self.path = path


class RenderFailure(NoteError):
    pass


class EditorError(NoteError):
    pass
