from __future__ import annotations

"""
Unit tests for the wildcard segment matcher.

Verifies '*' and '?' semantics, anchoring, case sensitivity and the
literal treatment of regex metacharacters.
"""

import pytest

from licensegen.core.glob.matcher import compile_segment, match_segment


def test_star_matches_extension() -> None:
    assert match_segment("foo.ts", "*.ts") is True
    assert match_segment("foo.ts", "*.js") is False


def test_star_matches_empty_run() -> None:
    assert match_segment(".ts", "*.ts") is True
    assert match_segment("", "*") is True


@pytest.mark.parametrize("name, expected", [
    ("abc", True),
    ("axc", True),
    ("ac", False),
    ("abbc", False),
])
def test_question_mark_is_exactly_one_char(name: str, expected: bool) -> None:
    assert match_segment(name, "a?c") is expected


def test_dot_is_literal() -> None:
    """'.' must not behave as the regex any-character."""
    assert match_segment("a.b", "a.b") is True
    assert match_segment("aXb", "a.b") is False


@pytest.mark.parametrize("segment", ["a+b(1).ts", "[ab]", "x^y$", "{a,b}", "back\\slash", "p|q"])
def test_metacharacters_match_only_themselves(segment: str) -> None:
    assert match_segment(segment, segment) is True


def test_metacharacters_do_not_widen_matches() -> None:
    assert match_segment("aab(1).ts", "a+b(1).ts") is False
    assert match_segment("a", "[ab]") is False
    assert match_segment("a", "{a,b}") is False


def test_matching_is_anchored() -> None:
    assert match_segment("foo.tsx", "foo.ts") is False
    assert match_segment("xfoo.ts", "foo.ts") is False
    assert match_segment("foo.ts.bak", "*.ts") is False


def test_matching_is_case_sensitive() -> None:
    assert match_segment("Foo.TS", "*.ts") is False
    assert match_segment("README", "readme") is False


def test_compiled_segments_are_cached() -> None:
    assert compile_segment("*.py") is compile_segment("*.py")
