"""Tests for include/exclude root resolution."""

from __future__ import annotations

import pytest

from header_check.scope import is_enabled, matches_root, normalize_path, normalize_root


# --- normalization ---


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Questions/", "Questions"),
        ("/Questions/", "Questions"),
        ("  Study/Bio  ", "Study/Bio"),
        ("///Archive///", "Archive"),
        (" / Notes / ", "Notes"),
        ("/", ""),
        ("   ", ""),
        ("Inner//Path", "Inner//Path"),
    ],
)
def test_normalize_root(raw: str, expected: str) -> None:
    assert normalize_root(raw) == expected


@pytest.mark.parametrize("raw", ["Questions/", " /a/b/ ", " / Notes / ", "", "x"])
def test_normalize_root_is_idempotent(raw: str) -> None:
    once = normalize_root(raw)
    assert normalize_root(once) == once


def test_normalize_path_keeps_trailing_separator() -> None:
    assert normalize_path("//Notes/Today/") == "Notes/Today/"


# --- matches_root ---


def test_root_matches_file_inside_folder() -> None:
    assert matches_root("Questions/Foo.md", "Questions") is True


def test_root_match_is_segment_prefix_not_substring() -> None:
    assert matches_root("QuestionsArchive/Foo.md", "Questions") is False


def test_root_matches_exact_path() -> None:
    assert matches_root("Study/Bio.md", "Study/Bio.md") is True
    assert matches_root("Study/Bio.md.bak", "Study/Bio.md") is False


def test_leading_separator_on_path_is_ignored() -> None:
    assert matches_root("/Questions/Foo.md", "Questions/") is True


def test_empty_root_never_matches() -> None:
    assert matches_root("Anything.md", "") is False
    assert matches_root("Anything.md", " / ") is False
    assert matches_root("", "") is False


def test_matching_is_case_sensitive() -> None:
    assert matches_root("questions/Foo.md", "Questions") is False


def test_backslash_is_not_a_separator() -> None:
    assert matches_root("Questions\\Foo.md", "Questions") is False


# --- is_enabled ---


def test_scenario_include_folder_enables_nested_file() -> None:
    assert is_enabled("Questions/Math/Q1.md", ["Questions/"], []) is True


def test_scenario_narrower_exclude_wins_over_include() -> None:
    assert is_enabled("Questions/Archive/Q2.md", ["Questions/"], ["Questions/Archive"]) is False


def test_scenario_empty_include_with_unrelated_exclude() -> None:
    assert is_enabled("Notes/Today.md", [], ["Archive/"]) is True


def test_path_outside_all_include_roots_is_disabled() -> None:
    assert is_enabled("Notes/Today.md", ["Questions/", "Study/"], []) is False


def test_any_include_root_is_enough() -> None:
    assert is_enabled("Study/Bio.md", ["Questions/", "Study/"], []) is True


@pytest.mark.parametrize("path", ["a.md", "deep/nested/file.md", "/rooted.md", ""])
def test_no_rules_enables_every_path(path: str) -> None:
    assert is_enabled(path, [], []) is True
    assert is_enabled(path, None, None) is True


@pytest.mark.parametrize(
    ("path", "include", "exclude"),
    [
        ("Questions/Q1.md", ["Questions"], ["Questions"]),
        ("Questions/Q1.md", ["Questions"], ["Questions/Q1.md"]),
        ("A/B/C.md", ["A"], ["A/B"]),
        ("A/B/C.md", [], ["A"]),
    ],
)
def test_exclude_dominates_include(path: str, include: list[str], exclude: list[str]) -> None:
    assert matches_root(path, exclude[-1])
    assert is_enabled(path, include, exclude) is False


def test_blank_include_roots_reject_everything() -> None:
    # A non-empty include list whose roots are all blank matches nothing.
    assert is_enabled("Notes/Today.md", ["  ", "/"], []) is False


def test_blank_exclude_roots_are_ignored() -> None:
    assert is_enabled("Notes/Today.md", [], ["", " / "]) is True


def test_accepts_tuples_and_generators() -> None:
    assert is_enabled("Study/Bio.md", ("Study",), (r for r in ["Archive"])) is True
