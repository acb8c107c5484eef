"""Behaviour every backend shares; each test runs against both."""

import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from mdnotes.errors import BackendIO, EmptyContent, EmptyTitle, NotFound
from mdnotes.infrastructure.backup import BackupManager
from mdnotes.settings import StoreConfig
from mdnotes.vault import FlatNoteStore, JsonNoteStore, NoteStore, open_store


@pytest.fixture(params=["flat", "json"])
def config(request, tmp_path):
    return StoreConfig(root=tmp_path, backend=request.param)


@pytest.fixture
def store(config):
    return open_store(config)


def test_open_store_picks_backend(config, store):
    expected = FlatNoteStore if config.backend == "flat" else JsonNoteStore
    assert isinstance(store, expected)
    assert isinstance(store, NoteStore)


def test_empty_collection(store):
    assert store.list() == []


def test_round_trip(store):
    ident = store.create("Meeting Notes", "discuss roadmap\n")
    assert ident == "Meeting_Notes"
    assert store.read("Meeting Notes") == "discuss roadmap\n"


def test_empty_content_allowed_on_create(store):
    store.create("Blank", "")
    assert store.read("Blank") == ""


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
def test_empty_title_rejected(store, title):
    with pytest.raises(EmptyTitle):
        store.create(title, "anything")
    assert store.list() == []


def test_duplicate_titles_get_ordered_suffixes(store):
    assert [store.create("foo", str(i)) for i in range(3)] == ["foo", "foo_1", "foo_2"]


def test_sanitizer_induced_collision(store):
    assert store.create("Plan", "a") == "Plan"
    assert store.create("Plan", "b") == "Plan_1"
    assert store.create("Plan!!", "c") == "Plan_2"
    assert store.get("Plan_2").content == "c"


def test_read_does_not_follow_suffixes(store):
    store.create("foo", "first")
    store.create("foo", "second")
    assert store.read("foo") == "first"
    assert store.read("foo_1") == "second"


def test_fully_stripped_title_uses_placeholder(store):
    assert store.create("???", "x") == "Untitled"
    assert store.create("!!!", "y") == "Untitled_1"
    assert store.read("???") == "x"


def test_read_missing(store):
    with pytest.raises(NotFound):
        store.read("nope")


def test_update_overwrites(store):
    store.create("Plan", "old")
    store.update("Plan", "new")
    assert store.read("Plan") == "new"


def test_update_missing_note(store):
    with pytest.raises(NotFound):
        store.update("nope", "text")
    assert store.list() == []


@pytest.mark.parametrize("content", ["", "   ", "\n\n"])
def test_update_rejects_blank_content(store, content):
    store.create("Plan", "keep me")
    with pytest.raises(EmptyContent):
        store.update("Plan", content)
    assert store.read("Plan") == "keep me"


def test_list_contains_every_identifier(store):
    for title in ("b", "a", "c"):
        store.create(title, title)
    assert sorted(store.list()) == ["a", "b", "c"]


class FailingBackups(BackupManager):
    def backup(self, path):
        raise BackendIO("creating backup of", path, OSError("disk full"))


def test_failed_backup_aborts_update(config):
    store = open_store(config)
    store.create("Plan", "original")

    broken = open_store(config, backups=FailingBackups())
    with pytest.raises(BackendIO):
        broken.update("Plan", "changed")

    assert open_store(config).read("Plan") == "original"
