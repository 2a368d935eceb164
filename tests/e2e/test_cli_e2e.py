from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script in a subprocess and checks exit codes,
stream output and the files written into a temporary project.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "licensegen" / "main.py"


def run_cli(args: List[str], cwd: Path) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    Injects 'src' into PYTHONPATH and isolates the run from the user's
    configuration file and terminal colors.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["PYTHONIOENCODING"] = "utf-8"
    env["NO_COLOR"] = "1"
    env["LICENSEGEN_CONFIG"] = str(cwd / "no-config.json")

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def node_project(tmp_path: Path) -> Path:
    """
    Structure:
    /app
      /src
        index.ts
        /bin
          cli.ts   (with shebang)
    """
    root = tmp_path / "app"
    (root / "src" / "bin").mkdir(parents=True)
    (root / "src" / "index.ts").write_text("export {};\n", encoding="utf-8")
    (root / "src" / "bin" / "cli.ts").write_text(
        "#!/usr/bin/env node\nconsole.log(1);\n", encoding="utf-8"
    )
    return root


def test_generate_license_and_headers(node_project: Path) -> None:
    args = ["mit", "--name", "Jane Doe", "--year", "2024", "--headers", "src/**/*.ts"]
    result = run_cli(args, node_project)

    assert result.returncode == 0, result.stderr
    assert "Added SPDX headers to 2 files" in result.stdout

    license_text = (node_project / "LICENSE").read_text(encoding="utf-8")
    assert "Copyright (c) 2024 Jane Doe" in license_text

    cli_lines = (node_project / "src" / "bin" / "cli.ts").read_text(encoding="utf-8").splitlines()
    assert cli_lines[0] == "#!/usr/bin/env node"
    assert cli_lines[1] == "// SPDX-License-Identifier: MIT"


def test_second_run_is_idempotent(node_project: Path) -> None:
    args = ["mit", "--name", "Jane Doe", "--year", "2024", "--headers", "src/**/*.ts", "--force"]
    assert run_cli(args, node_project).returncode == 0
    snapshot = (node_project / "src" / "index.ts").read_text(encoding="utf-8")

    second = run_cli(args, node_project)

    assert second.returncode == 0
    assert "Added SPDX headers to 0 files" in second.stdout
    assert (node_project / "src" / "index.ts").read_text(encoding="utf-8") == snapshot


def test_list_json(tmp_path: Path) -> None:
    result = run_cli(["--list", "--json"], tmp_path)

    assert result.returncode == 0
    ids = [row["id"] for row in json.loads(result.stdout)]
    assert ids[:3] == ["mit", "apache-2.0", "gpl-3.0"]


def test_unknown_license_fails(tmp_path: Path) -> None:
    result = run_cli(["nope"], tmp_path)

    assert result.returncode == 1
    assert 'Unknown license: "nope"' in result.stderr
    assert not (tmp_path / "LICENSE").exists()
