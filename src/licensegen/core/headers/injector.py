from __future__ import annotations

"""
SPDX Header Injection Service.

Prepends a two-line SPDX/copyright comment block to source files. The
operation is best-effort and idempotent:

  - files that cannot be read or written are skipped and not counted;
  - files already carrying an 'SPDX-License-Identifier' are left untouched;
  - a leading directive ('#!', '<?xml', '<?php') stays the physical first line.
"""

import logging
from typing import Iterable, Optional

from licensegen.core.headers.comments import CommentStyle, comment_style_for
from licensegen.domain.constants import LEADING_DIRECTIVES, SPDX_MARKER
from licensegen.domain.models import HeaderRecord, UnreadableFile
from licensegen.infra.fs import read_text_file, safe_write_text

logger = logging.getLogger(__name__)


# ==============================================================================
# PURE TRANSFORMATIONS
# ==============================================================================

def build_header(record: HeaderRecord, style: CommentStyle, newline: str = "\n") -> str:
    """
    Render the header block: identifier line, copyright line, blank line.

    Args:
        record: SPDX identifier, holder and year.
        style: Comment delimiters for the target file.
        newline: Line terminator matching the target file.

    Returns:
        str: The complete block, terminated by an empty line.
    """
    lines = [
        style.wrap(f"{SPDX_MARKER}: {record.spdx}"),
        style.wrap(f"Copyright (c) {record.year} {record.name}"),
        "",
    ]
    return newline.join(lines) + newline


def has_spdx_header(content: str) -> bool:
    return SPDX_MARKER in content


def detect_newline(content: str) -> str:
    """Return '\\r\\n' for CRLF files, '\\n' otherwise."""
    return "\r\n" if "\r\n" in content else "\n"


def inject_header(content: str, header: str) -> str:
    """
    Insert a header block into file content.

    When the content starts with a directive ('#!', '<?xml' or '<?php'),
    the header goes right after the directive line; otherwise it is
    prepended.

    Args:
        content: Original file text.
        header: Rendered block from build_header.

    Returns:
        str: New file text.
    """
    if not content.startswith(LEADING_DIRECTIVES):
        return header + content

    newline_idx = content.find("\n")
    if newline_idx == -1:
        return content + detect_newline(header) + header

    directive = content[:newline_idx + 1]
    rest = content[newline_idx + 1:]
    return directive + header + rest


# ==============================================================================
# FILESYSTEM OPERATIONS
# ==============================================================================

def add_header_to_file(path: str, record: HeaderRecord, style: Optional[CommentStyle] = None) -> bool:
    """
    Add the SPDX header to one file if it does not already have one.

    Args:
        path: File to rewrite in place.
        record: Header values.
        style: Explicit comment style; derived from the file name if None.

    Returns:
        bool: True only if the file was modified.
    """
    read = read_text_file(path)
    if isinstance(read, UnreadableFile):
        logger.debug(f"Skipping unreadable file {read.path}: {read.reason}")
        return False

    if has_spdx_header(read.text):
        logger.debug(f"Header already present: {path}")
        return False

    header = build_header(
        record,
        style or comment_style_for(path),
        detect_newline(read.text),
    )
    ok, error = safe_write_text(path, inject_header(read.text, header))
    if not ok:
        logger.warning(f"Could not write header to {path}: {error}")
        return False

    logger.debug(f"Header added: {path}")
    return True


def add_spdx_headers(files: Iterable[str], record: HeaderRecord) -> int:
    """
    Add SPDX headers to every file in a match result.

    Args:
        files: Paths produced by the glob resolver.
        record: Header values shared by all files.

    Returns:
        int: Number of files actually modified.
    """
    count = 0
    for path in files:
        if add_header_to_file(path, record):
            count += 1

    logger.debug(f"SPDX headers added to {count} file(s)")
    return count
