from __future__ import annotations

"""
Copyright Holder Detection.

Resolves a default copyright holder when none is supplied on the command
line. Sources are tried in order: git configuration, package.json,
pyproject.toml. Every source is optional and failures fall through to the
next one.
"""

import json
import logging
import os
import subprocess
import tomllib
from typing import Any, Optional

from licensegen.domain.constants import FALLBACK_AUTHOR

logger = logging.getLogger(__name__)

GIT_TIMEOUT_SECONDS = 5


# ==============================================================================
# PUBLIC API
# ==============================================================================

def detect_name(cwd: Optional[str] = None) -> str:
    """
    Find the most likely copyright holder for the project in cwd.

    Args:
        cwd: Project directory. Defaults to the process working directory.

    Returns:
        str: Detected name, or the 'Your Name' placeholder.
    """
    base = cwd or os.getcwd()
    for source in (_name_from_git, _name_from_package_json, _name_from_pyproject):
        name = source(base)
        if name:
            logger.debug(f"Copyright holder resolved via {source.__name__}: {name}")
            return name

    logger.debug("No copyright holder detected; using placeholder.")
    return FALLBACK_AUTHOR


# ==============================================================================
# SOURCES
# ==============================================================================

def _name_from_git(cwd: str) -> str:
    try:
        completed = subprocess.run(
            ["git", "config", "user.name"],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT_SECONDS,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"git unavailable: {e}")
        return ""

    if completed.returncode != 0:
        return ""
    return completed.stdout.strip()


def _name_from_package_json(cwd: str) -> str:
    data = _load_json(os.path.join(cwd, "package.json"))
    if not isinstance(data, dict):
        return ""
    return _author_name(data.get("author"))


def _name_from_pyproject(cwd: str) -> str:
    path = os.path.join(cwd, "pyproject.toml")
    if not os.path.isfile(path):
        return ""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.debug(f"Ignoring unreadable pyproject.toml: {e}")
        return ""

    authors = data.get("project", {}).get("authors") or []
    if isinstance(authors, list) and authors:
        return _author_name(authors[0])
    return ""

# ==============================================================================
# HELPERS
# ==============================================================================

def _load_json(path: str) -> Any:
    if not os.path.isfile(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        logger.debug(f"Ignoring unreadable {path}: {e}")
        return None


def _author_name(author: Any) -> str:
    """Extract a name from either a plain string or a {'name': ...} object."""
    if isinstance(author, str):
        return author.strip()
    if isinstance(author, dict):
        name = author.get("name")
        if isinstance(name, str):
            return name.strip()
    return ""
