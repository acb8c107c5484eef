import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from mdnotes.errors import BackendIO
from mdnotes.vault import FlatNoteStore


@pytest.fixture
def store(tmp_path):
    return FlatNoteStore(tmp_path / "notes")


def test_create_writes_raw_body(store):
    store.create("Plan", "# Plan\n\nbody\n")
    assert (store.notes_dir / "Plan.md").read_text(encoding="utf-8") == "# Plan\n\nbody\n"


def test_create_makes_notes_dir(store):
    assert not store.notes_dir.exists()
    store.create("Plan", "x")
    assert store.notes_dir.is_dir()


def test_update_leaves_backup_beside_note(store):
    store.create("Plan", "before")
    store.update("Plan", "after")

    assert (store.notes_dir / "Plan.md").read_text(encoding="utf-8") == "after"
    assert (store.notes_dir / "Plan.md.bak").read_text(encoding="utf-8") == "before"


def test_second_update_keeps_single_backup(store):
    store.create("Plan", "v1")
    store.update("Plan", "v2")
    store.update("Plan", "v3")

    assert (store.notes_dir / "Plan.md.bak").read_text(encoding="utf-8") == "v2"
    assert sorted(p.name for p in store.notes_dir.iterdir()) == ["Plan.md", "Plan.md.bak"]


def test_list_is_sorted_and_skips_other_files(store):
    for title in ("beta", "Alpha", "gamma"):
        store.create(title, title)
    store.update("beta", "changed")
    (store.notes_dir / "readme.txt").write_text("not a note", encoding="utf-8")
    (store.notes_dir / ".hidden.md").write_text("tmp", encoding="utf-8")

    assert store.list() == ["Alpha", "beta", "gamma"]


def test_existing_files_count_as_taken(store):
    store.notes_dir.mkdir()
    (store.notes_dir / "Plan.md").write_text("made elsewhere", encoding="utf-8")

    assert store.create("Plan", "mine") == "Plan_1"


def test_notes_dir_that_is_a_file(tmp_path):
    blocker = tmp_path / "notes"
    blocker.write_text("", encoding="utf-8")
    store = FlatNoteStore(blocker)

    with pytest.raises(BackendIO):
        store.create("Plan", "x")


def test_undecodable_note(store):
    store.notes_dir.mkdir()
    (store.notes_dir / "legacy.md").write_bytes(b"caf\xe9")

    with pytest.raises(BackendIO) as info:
        store.read("legacy")
    assert isinstance(info.value.__cause__, UnicodeDecodeError)
