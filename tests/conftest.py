from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Isolates every test from the user's config file, colors and logging state.
3. Provides a small source tree used by the glob and header tests.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Iterable, Iterator, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from licensegen.domain.models import HeaderRecord  # noqa: E402
from licensegen.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Isolation
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point the user config at a missing file, disable colors, reset logging."""
    monkeypatch.setenv("LICENSEGEN_CONFIG", str(tmp_path / "no-such-config.json"))
    monkeypatch.setenv("NO_COLOR", "1")
    yield
    shutdown_logging()


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """
    Create a project tree for glob resolution tests.

    Structure:
    /project
      /src
        index.ts
        app.js
        /lib
          util.ts
          readme.md
          /deep
            more.ts
      /other
        x.ts
    """
    root = tmp_path / "project"
    (root / "src" / "lib" / "deep").mkdir(parents=True)
    (root / "other").mkdir()

    (root / "src" / "index.ts").write_text("export {};\n", encoding="utf-8")
    (root / "src" / "app.js").write_text("console.log(1);\n", encoding="utf-8")
    (root / "src" / "lib" / "util.ts").write_text("export const a = 1;\n", encoding="utf-8")
    (root / "src" / "lib" / "readme.md").write_text("# lib\n", encoding="utf-8")
    (root / "src" / "lib" / "deep" / "more.ts").write_text("export const b = 2;\n", encoding="utf-8")
    (root / "other" / "x.ts").write_text("export const c = 3;\n", encoding="utf-8")

    return root


@pytest.fixture
def header_record() -> HeaderRecord:
    return HeaderRecord(spdx="MIT", name="Jane Doe", year="2024")


@pytest.fixture
def rel() -> Callable[[Iterable[str], Path], List[str]]:
    """Sorted, '/'-joined paths relative to a root, for order-free comparison."""
    def _rel(paths: Iterable[str], root: Path) -> List[str]:
        return sorted(Path(p).relative_to(root).as_posix() for p in paths)
    return _rel
