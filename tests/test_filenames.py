import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from mdnotes.core.filenames import note_stem, sanitize_title, unique_filename, unique_identifier


def test_basic():
    assert sanitize_title("Hello World") == "Hello_World"


def test_keeps_underscore_and_hyphen():
    assert sanitize_title("to-do_list 2") == "to-do_list_2"


def test_drops_punctuation_and_unicode():
    assert sanitize_title("Plan!!") == "Plan"
    assert sanitize_title("a/b\\c") == "abc"
    assert sanitize_title("café ☕") == "caf_"


def test_all_disallowed_is_empty():
    assert sanitize_title("!!!") == ""
    assert note_stem("!!!") == "Untitled"


@pytest.mark.parametrize("title", [
    "Hello World",
    "  spaced  out  ",
    "Plan!!",
    "a/b\\c",
    "___",
    "",
    "Ünïcödé title",
    "tabs\tand\nnewlines",
])
def test_sanitize_is_idempotent(title):
    once = sanitize_title(title)
    assert sanitize_title(once) == once


def test_unique_filename_free():
    assert unique_filename("Plan", set()) == "Plan.md"


def test_unique_filename_suffixes_in_order():
    existing = {"Plan.md"}
    assert unique_filename("Plan", existing) == "Plan_1.md"
    existing.add("Plan_1.md")
    assert unique_filename("Plan", existing) == "Plan_2.md"


def test_unique_filename_fills_first_gap():
    assert unique_filename("Plan", {"Plan.md", "Plan_2.md"}) == "Plan_1.md"


def test_unique_identifier_matches_filename_policy():
    assert unique_identifier("Plan", {"Plan", "Plan_1"}) == "Plan_2"
