"""Interactive menu around a :class:`~mdnotes.vault.NoteStore`."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from mdnotes.core.search import SearchEngine
from mdnotes.errors import EmptyTitle, NoteError
from mdnotes.logging_setup import log
from mdnotes.services.editor import edit_text
from mdnotes.settings import default_editor
from mdnotes.vault.base import NoteStore

END_MARKER = "END"

MENU = """
Markdown Note Manager
=====================
1. Create a new note
2. View a note
3. Edit a note
4. List all notes
5. Search notes
6. Exit
"""


class NotesShell:
    def __init__(
        self,
        store: NoteStore,
        *,
        editor: str | None = None,
        edit: Callable[[str, str], str] = edit_text,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ):
        self.store = store
        self.search = SearchEngine(store)
        self.editor = editor or default_editor()
        self._edit = edit
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout

    # ───────────────────────── io helpers ─────────────────────────

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def _ask(self, prompt: str) -> str | None:
        """Prompt for one line; None at end of input."""
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            return None
        return line.strip()

    def _read_body(self, prompt: str) -> str:
        self._print(prompt)
        lines: list[str] = []
        for line in iter(self._in.readline, ""):
            if line.strip() == END_MARKER:
                break
            lines.append(line)
        return "".join(lines)

    def _choose(self, options: list[str]) -> str | None:
        for i, option in enumerate(options, start=1):
            self._print(f"{i}. {option}")
        return self._ask(f"\nSelect an option (1-{len(options)}): ")

    def _print_titles(self, identifiers: list[str]) -> None:
        for ident in identifiers:
            self._print(f"- {ident}")

    # ───────────────────────── main loop ─────────────────────────

    def run(self) -> int:
        actions = {
            "1": self.create_note,
            "2": self.view_note,
            "3": self.edit_note,
            "4": self.list_notes,
            "5": self.search_notes,
        }
        while True:
            self._print(MENU)
            choice = self._ask("Select an option (1-6): ")
            if choice is None or choice == "6":
                self._print("Exiting")
                return 0

            action = actions.get(choice)
            if action is None:
                self._print("Invalid choice. Please select a valid option (1-6).")
                continue

            try:
                action()
            except NoteError as exc:
                log.warning("%s failed: %s", action.__name__, exc)
                self._print(str(exc))

    # ───────────────────────── actions ─────────────────────────

    def create_note(self) -> None:
        title = self._ask("Enter note title: ")
        if title is None:
            return
        content = self._read_body(f"Enter note content (type '{END_MARKER}' on a new line to finish):")

        while True:
            try:
                ident = self.store.create(title, content)
                break
            except EmptyTitle as exc:
                self._print(f"{exc} Please try again.")
                title = self._ask("Enter note title: ")
                if title is None:
                    return

        self._print(f"Note successfully saved as {ident}")

    def view_note(self) -> None:
        title = self._ask("Enter note title to read: ")
        if title is None:
            return
        content = self.store.read(title)
        if not content:
            self._print("No content to display")
            return
        self._print(f"---- {title} ----\n\n{content}\n\n-----------------")

    def edit_note(self) -> None:
        mode = self._choose(["Edit note inline", "Edit note with editor"])
        if mode == "1":
            self._edit_inline()
        elif mode == "2":
            self._edit_with_editor()
        elif mode is not None:
            self._print("Invalid choice. Please select a valid option (1-2).")

    def _edit_inline(self) -> None:
        title = self._ask("Enter note title to edit inline: ")
        if title is None:
            return
        current = self.store.read(title)
        self._print("Current Content:")
        self._print(current)

        updated = self._read_body(f"Enter new content for the note (type '{END_MARKER}' on a new line to finish):")
        self.store.update(title, updated)
        self._print(f"The note '{title}' has been updated successfully.")

    def _edit_with_editor(self) -> None:
        title = self._ask("Enter note title to edit with editor: ")
        if title is None:
            return
        current = self.store.read(title)
        updated = self._edit(current, self.editor)
        if updated == current:
            self._print(f"The note '{title}' was not changed.")
            return
        self.store.update(title, updated)
        self._print(f"The note '{title}' has been updated.")

    def list_notes(self) -> None:
        identifiers = self.store.list()
        if not identifiers:
            self._print("No notes found.")
            return
        self._print("\nYour Notes:")
        self._print_titles(identifiers)

    def search_notes(self) -> None:
        mode = self._choose(["Search for note title", "Search for note content"])
        if mode == "1":
            query = self._ask("Enter note title to search: ")
            if query is None:
                return
            self._print(f"Searching for notes with titles containing '{query}':")
            found = self.search.search_by_title(query)
            what = "title"
        elif mode == "2":
            query = self._ask("Enter note content to search: ")
            if query is None:
                return
            self._print(f"Searching for notes with content containing '{query}':")
            found = self.search.search_by_content(query)
            what = "content"
        else:
            if mode is not None:
                self._print("Invalid choice. Please select a valid option (1-2).")
            return

        if not found:
            self._print(f"No notes found with the specified {what}.")
            return
        self._print_titles(found)
