from __future__ import annotations

"""
License Generation Service.

Orchestrates a complete run: resolves the license and copyright holder,
renders the template, writes the LICENSE file and, when header globs are
configured, injects SPDX headers into the matched source files.

Failures are returned inside the GenerationResult rather than raised, so
interface layers only have to render the outcome.
"""

import logging
import os
from typing import Any, Dict, List

from licensegen.core.glob.resolver import resolve_patterns
from licensegen.core.headers.injector import add_spdx_headers
from licensegen.core.services.author import detect_name
from licensegen.domain.licenses import get_license
from licensegen.domain.models import GenerationResult, HeaderRecord, create_error_result
from licensegen.infra.fs import normalize_path, write_text_file

logger = logging.getLogger(__name__)


def generate_license(config: Dict[str, Any]) -> GenerationResult:
    """
    Execute a license generation run from a validated configuration.

    Args:
        config: Output of validate_config.

    Returns:
        GenerationResult: Outcome and metadata of the run.
    """
    identifier = config.get("license", "")
    info = get_license(identifier)
    if info is None:
        return create_error_result(f'Unknown license: "{identifier}"')

    base_dir = normalize_path(config.get("base_dir"), os.getcwd())
    author = config.get("name") or detect_name(base_dir)
    year = config["year"]
    content = info.render(author, year)

    output = config["output"]
    output_path = output if os.path.isabs(output) else os.path.join(base_dir, output)
    meta = {
        "license_key": info.key,
        "license_name": info.name,
        "spdx": info.spdx,
        "author": author,
        "year": year,
        "output": output,
        "output_path": output_path,
    }

    if os.path.exists(output_path) and not config.get("force"):
        return create_error_result(f"{output} already exists. Use --force to overwrite.", **meta)

    # JSON mode only reports the rendered text
    if config.get("json_output"):
        return GenerationResult(ok=True, content=content, **meta)

    if config.get("dry_run"):
        files = resolve_patterns(config.get("headers") or [], base_dir)
        logger.info(f"Dry run: {output_path} not written, {len(files)} file(s) matched.")
        return GenerationResult(ok=True, content=content, header_files=files, **meta)

    ok, error = write_text_file(output_path, content)
    if not ok:
        return create_error_result(f"Could not write {output}: {error}", **meta)
    logger.debug(f"Wrote {output_path}")

    headers_added = 0
    files: List[str] = []
    if config.get("headers"):
        files = resolve_patterns(config["headers"], base_dir)
        record = HeaderRecord(spdx=info.spdx, name=author, year=year)
        headers_added = add_spdx_headers(files, record)

    return GenerationResult(
        ok=True,
        content=content,
        written=True,
        headers_added=headers_added,
        header_files=files,
        **meta,
    )
