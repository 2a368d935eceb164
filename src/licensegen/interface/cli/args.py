from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

from licensegen import __version__

_EPILOG = """\
examples:
  licensegen mit
  licensegen apache-2.0 --name "Jane Doe"
  licensegen gpl-3.0 --output COPYING
  licensegen mit --headers "src/**/*.ts,src/**/*.js"
  licensegen --list

supported licenses:
  MIT, Apache-2.0, GPL-3.0, GPL-2.0, BSD-2-Clause, BSD-3-Clause,
  ISC, MPL-2.0, LGPL-3.0, AGPL-3.0, Unlicense, CC0-1.0, 0BSD
"""

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the licensegen CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="licensegen",
        description="Generate LICENSE files and add SPDX headers to source files.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    p.add_argument(
        "license",
        nargs="?",
        default=None,
        help="License identifier (e.g. mit, apache-2.0, GPL-3.0-only).",
    )

    # --- Catalogue ---
    p.add_argument(
        "-l", "--list",
        dest="list_licenses",
        action="store_true",
        help="List all available license IDs.",
    )

    # --- License content ---
    p.add_argument("-n", "--name", default=None, help="Copyright holder name.")
    p.add_argument("-y", "--year", default=None, help="Copyright year (default: current year).")
    p.add_argument("-o", "--output", default=None, help="Output filename (default: LICENSE).")
    p.add_argument(
        "--headers",
        default=None,
        metavar="GLOBS",
        help="Add SPDX headers to source files (comma-separated globs).",
    )

    # --- Safety ---
    p.add_argument("-f", "--force", action="store_true", help="Overwrite an existing LICENSE file.")
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would be written without touching any file.",
    )

    # --- Output and diagnostics ---
    p.add_argument("--json", dest="json_output", action="store_true", help="Output license info as JSON.")
    p.add_argument("--debug", action="store_true", help="Elevate logging verbosity to DEBUG.")
    p.add_argument("--log-file", default=None, help="Also write diagnostics to this file.")
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the user configuration file.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Values left at None are dropped by merge_config, so the user config
    file and defaults stay in effect for them.
    """
    overrides: Dict[str, Any] = {
        "license": args.license,
        "name": args.name,
        "year": args.year,
        "output": args.output,
        "headers": split_csv(args.headers),
    }

    if args.force:
        overrides["force"] = True
    if args.json_output:
        overrides["json_output"] = True
    if args.dry_run:
        overrides["dry_run"] = True

    return overrides


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of known, non-None override values into base."""
    out = dict(base)
    for key in ("license", "name", "year", "output", "headers", "force", "json_output", "dry_run"):
        if overrides.get(key) is not None:
            out[key] = overrides[key]
    return out

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of non-empty items."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
