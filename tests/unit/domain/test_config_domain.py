from __future__ import annotations

"""Unit tests for default and user-file configuration loading."""

import json
from pathlib import Path

import pytest

from licensegen.domain.config import get_config_path, get_default_config, load_config


def test_defaults() -> None:
    conf = get_default_config()
    assert conf["output"] == "LICENSE"
    assert conf["headers"] == []
    assert conf["year"].isdigit()


def test_env_var_overrides_location(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "custom.json"
    monkeypatch.setenv("LICENSEGEN_CONFIG", str(target))
    assert get_config_path() == str(target)


def test_missing_file_yields_defaults() -> None:
    assert load_config()["name"] == ""


def test_user_file_overlays_known_keys(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "name": "Jane Doe",
        "headers": ["src/**/*.py"],
        "base_dir": "/elsewhere",
        "unknown": 1,
    }), encoding="utf-8")

    conf = load_config(str(path))

    assert conf["name"] == "Jane Doe"
    assert conf["headers"] == ["src/**/*.py"]
    assert conf["base_dir"] != "/elsewhere"
    assert "unknown" not in conf


@pytest.mark.parametrize("payload", ["{broken", "[1, 2]"])
def test_invalid_file_is_ignored(tmp_path: Path, payload: str) -> None:
    path = tmp_path / "config.json"
    path.write_text(payload, encoding="utf-8")
    assert load_config(str(path)) == get_default_config()
