from __future__ import annotations

"""Unit tests for the filesystem result-variant wrappers."""

import os
import stat
from pathlib import Path

import pytest

from licensegen.domain.models import (
    DirectoryEntries,
    InaccessibleDirectory,
    TextContent,
    UnreadableFile,
)
from licensegen.infra.fs import (
    list_directory,
    normalize_path,
    read_text_file,
    safe_write_text,
    write_text_file,
)

_RUNS_AS_ROOT = hasattr(os, "geteuid") and os.geteuid() == 0


def test_list_directory_tags_entries(tmp_path: Path) -> None:
    (tmp_path / "sub").mkdir()
    (tmp_path / "file.txt").write_text("x", encoding="utf-8")

    listing = list_directory(str(tmp_path))

    assert isinstance(listing, DirectoryEntries)
    by_name = {e.name: e for e in listing.entries}
    assert by_name["sub"].is_dir and not by_name["sub"].is_file
    assert by_name["file.txt"].is_file and not by_name["file.txt"].is_dir
    assert by_name["file.txt"].path == os.path.join(str(tmp_path), "file.txt")


def test_list_missing_or_file_is_inaccessible(tmp_path: Path) -> None:
    (tmp_path / "file.txt").write_text("x", encoding="utf-8")

    for target in (tmp_path / "absent", tmp_path / "file.txt"):
        listing = list_directory(str(target))
        assert isinstance(listing, InaccessibleDirectory)
        assert listing.reason


def test_read_text_file_variants(tmp_path: Path) -> None:
    good = tmp_path / "good.txt"
    good.write_bytes(b"line\r\nnext\n")
    bad = tmp_path / "bad.bin"
    bad.write_bytes(b"\xff\xfe")

    read = read_text_file(str(good))
    assert isinstance(read, TextContent)
    assert read.text == "line\r\nnext\n"

    assert isinstance(read_text_file(str(bad)), UnreadableFile)
    assert isinstance(read_text_file(str(tmp_path / "absent")), UnreadableFile)


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_safe_write_text_keeps_mode_and_leaves_no_temp(tmp_path: Path) -> None:
    target = tmp_path / "tool.sh"
    target.write_text("old", encoding="utf-8")
    target.chmod(0o750)

    ok, error = safe_write_text(str(target), "new")

    assert (ok, error) == (True, None)
    assert target.read_text(encoding="utf-8") == "new"
    assert stat.S_IMODE(target.stat().st_mode) == 0o750
    assert [p.name for p in tmp_path.iterdir()] == ["tool.sh"]


@pytest.mark.skipif(os.name == "nt" or _RUNS_AS_ROOT, reason="requires POSIX permissions")
def test_safe_write_text_refuses_read_only_target(tmp_path: Path) -> None:
    target = tmp_path / "locked.ts"
    target.write_text("old", encoding="utf-8")
    target.chmod(0o444)
    try:
        ok, error = safe_write_text(str(target), "new")
    finally:
        target.chmod(0o644)

    assert ok is False
    assert "Permission denied" in error
    assert target.read_text(encoding="utf-8") == "old"
    assert [p.name for p in tmp_path.iterdir()] == ["locked.ts"]


@pytest.mark.skipif(not hasattr(os, "link") or os.name == "nt", reason="requires hard links")
def test_safe_write_text_keeps_hard_links(tmp_path: Path) -> None:
    target = tmp_path / "a.ts"
    target.write_text("old", encoding="utf-8")
    alias = tmp_path / "b.ts"
    os.link(target, alias)

    ok, _ = safe_write_text(str(target), "new")

    assert ok is True
    assert alias.read_text(encoding="utf-8") == "new"
    assert os.path.samefile(target, alias)


def test_writes_into_missing_directory_fail_softly(tmp_path: Path) -> None:
    target = str(tmp_path / "absent" / "f.txt")

    ok, error = safe_write_text(target, "x")
    assert ok is False and error

    ok, error = write_text_file(target, "x")
    assert ok is False and error


def test_normalize_path_fallback(tmp_path: Path) -> None:
    assert normalize_path("", str(tmp_path)) == str(tmp_path)
    assert normalize_path(None, str(tmp_path)) == str(tmp_path)
    assert os.path.isabs(normalize_path("relative/dir", str(tmp_path)))
