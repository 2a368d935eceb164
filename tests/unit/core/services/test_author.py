from __future__ import annotations

"""
Unit tests for copyright holder detection.

git is mocked; manifest files are created in a temporary project.
"""

import json
import subprocess
from pathlib import Path
from unittest.mock import patch

from licensegen.core.services.author import detect_name

_RUN = "licensegen.core.services.author.subprocess.run"


def _git_result(stdout: str, returncode: int = 0) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(["git"], returncode, stdout=stdout, stderr="")


def test_git_user_name_wins(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text(json.dumps({"author": "Pkg Author"}), encoding="utf-8")
    with patch(_RUN, return_value=_git_result("Git User\n")):
        assert detect_name(str(tmp_path)) == "Git User"


def test_package_json_string_author(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text(json.dumps({"author": "Pkg Author"}), encoding="utf-8")
    with patch(_RUN, return_value=_git_result("", returncode=1)):
        assert detect_name(str(tmp_path)) == "Pkg Author"


def test_package_json_object_author(tmp_path: Path) -> None:
    payload = {"author": {"name": "Object Author", "email": "a@b.c"}}
    (tmp_path / "package.json").write_text(json.dumps(payload), encoding="utf-8")
    with patch(_RUN, side_effect=FileNotFoundError("git")):
        assert detect_name(str(tmp_path)) == "Object Author"


def test_pyproject_author(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "x"\nauthors = [{ name = "Py Author" }]\n',
        encoding="utf-8",
    )
    with patch(_RUN, side_effect=subprocess.TimeoutExpired("git", 5)):
        assert detect_name(str(tmp_path)) == "Py Author"


def test_corrupt_manifests_fall_back_to_placeholder(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text("[project\n", encoding="utf-8")
    with patch(_RUN, return_value=_git_result("   \n")):
        assert detect_name(str(tmp_path)) == "Your Name"
