from __future__ import annotations

"""
Command Line Interface Application Controller.

Drives one CLI invocation: logging bootstrap, configuration resolution
(defaults, user file, flags), license generation and result rendering.
"""

import json
import sys
from typing import List, Optional

from licensegen.core.services.generator import generate_license
from licensegen.core.services.validator import validate_config
from licensegen.domain.config import get_default_config, load_config
from licensegen.domain.licenses import list_licenses
from licensegen.domain.models import GenerationResult
from licensegen.infra.logging import LoggingConfig, configure_logging, get_logger
from licensegen.interface.cli import args as cli_args
from licensegen.interface.cli.style import Palette, pad, palette_for

logger = get_logger(__name__)

_ID_WIDTH = 16
_NAME_WIDTH = 45

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments without the program name. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    if args.list_licenses:
        _print_license_list(args.json_output)
        return 0

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = cli_args.merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration: {w}")

    if not conf["license"]:
        parser.print_help()
        return 1

    try:
        result = generate_license(conf)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    if not result.ok:
        _print_error(result)
        return 1

    if conf["json_output"]:
        print(json.dumps(result.to_json_payload(), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, dry_run=conf["dry_run"], headers_requested=bool(conf["headers"]))
    return 0

# -----------------------------------------------------------------------------
# VIEWS
# -----------------------------------------------------------------------------

def _print_license_list(as_json: bool) -> None:
    rows = list_licenses()
    if as_json:
        print(json.dumps(rows, indent=2))
        return

    c = palette_for(sys.stdout)
    print(f"\n{c.bold}{c.magenta}Available Licenses{c.reset}\n")
    print(f"  {c.bold}{pad('ID', _ID_WIDTH)}  {pad('NAME', _NAME_WIDTH)}  OSI{c.reset}")
    print(f"  {c.dim}{'─' * (_ID_WIDTH + _NAME_WIDTH + 8)}{c.reset}")
    for row in rows:
        osi = f"{c.green}Yes{c.reset}" if row["osiApproved"] else f"{c.dim}No{c.reset}"
        print(f"  {c.cyan}{pad(row['id'], _ID_WIDTH)}{c.reset}  {pad(row['name'], _NAME_WIDTH)}  {osi}")
    print("")


def _print_error(result: GenerationResult) -> None:
    c = palette_for(sys.stderr)
    print(f"\n{c.red}{result.error}{c.reset}", file=sys.stderr)
    if not result.license_key:
        print(
            f"{c.dim}Run {c.cyan}licensegen --list{c.dim} to see available licenses.{c.reset}\n",
            file=sys.stderr,
        )


def _print_human_summary(result: GenerationResult, *, dry_run: bool, headers_requested: bool) -> None:
    c = palette_for(sys.stdout)

    if dry_run:
        print(f"\n{c.yellow}Dry run:{c.reset} would generate {c.cyan}{result.output_path}{c.reset} "
              f"with {c.bold}{result.license_name}{c.reset}")
    else:
        print(f"\n{c.green}{c.bold}✓{c.reset} Generated {c.cyan}{result.output_path}{c.reset} "
              f"with {c.bold}{result.license_name}{c.reset}")
    print(f"  {c.dim}Copyright (c) {result.year} {result.author}{c.reset}")
    print(f"  {c.dim}SPDX: {result.spdx}{c.reset}")

    if headers_requested:
        if dry_run:
            _print_count(c, "Would check", len(result.header_files), "for SPDX headers")
        else:
            _print_count(c, "Added SPDX headers to", result.headers_added, "")
    print("")


def _print_count(c: Palette, label: str, count: int, suffix: str) -> None:
    noun = "file" if count == 1 else "files"
    tail = f" {suffix}" if suffix else ""
    print(f"  {c.green}{c.bold}✓{c.reset} {label} {c.bold}{count}{c.reset} {noun}{tail}")


if __name__ == "__main__":
    sys.exit(main())
