from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over 'os' that convert I/O failures into explicit result
values. The glob resolver and the header injector rely on these variants
to stay best-effort: an inaccessible directory or unreadable file is data,
not an exception.
"""

import logging
import os
import shutil
import tempfile
from typing import List, Optional, Tuple

from licensegen.domain.constants import CONFIG_DIR_NAME, UNIX_CONFIG_DIR_NAME
from licensegen.domain.models import (
    DirectoryEntries,
    DirectoryEntry,
    DirectoryListing,
    FileContent,
    InaccessibleDirectory,
    TextContent,
    UnreadableFile,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_config_dir() -> str:
    """
    Resolve the OS-specific directory holding the optional user config.

    The directory is not created; callers only read from it.

    Returns:
        str: Absolute path (Windows: %LOCALAPPDATA%/licensegen,
             elsewhere: ~/.licensegen).
    """
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            return os.path.abspath(os.path.join(base, CONFIG_DIR_NAME))

    home = os.path.expanduser("~")
    return os.path.abspath(os.path.join(home, UNIX_CONFIG_DIR_NAME))


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Expands '~' and environment variables; empty input reverts to fallback.
    """
    p = (path or "").strip() or fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))

# -----------------------------------------------------------------------------
# DIRECTORY LISTING
# -----------------------------------------------------------------------------

def list_directory(path: str) -> DirectoryListing:
    """
    Read the entries of a directory.

    Entries are tagged without following symlinks, so a symlinked directory
    is never descended into and cannot create a traversal cycle.

    Args:
        path: Directory to list.

    Returns:
        DirectoryListing: DirectoryEntries on success, InaccessibleDirectory
                          when the directory cannot be read.
    """
    entries: List[DirectoryEntry] = []
    try:
        with os.scandir(path) as it:
            for entry in it:
                entries.append(DirectoryEntry(
                    name=entry.name,
                    path=os.path.join(path, entry.name),
                    is_dir=_safe_is_dir(entry),
                    is_file=_safe_is_file(entry),
                ))
    except OSError as e:
        return InaccessibleDirectory(path=path, reason=str(e))

    return DirectoryEntries(path=path, entries=tuple(entries))

# -----------------------------------------------------------------------------
# FILE CONTENT I/O
# -----------------------------------------------------------------------------

def read_text_file(path: str) -> FileContent:
    """
    Read a whole file as UTF-8 text.

    Newlines are returned untranslated so that a rewrite preserves them.

    Returns:
        FileContent: TextContent, or UnreadableFile on I/O or decode errors.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return TextContent(path=path, text=f.read())
    except (OSError, UnicodeDecodeError) as e:
        return UnreadableFile(path=path, reason=str(e))


def write_text_file(path: str, content: str) -> Tuple[bool, Optional[str]]:
    """
    Create or truncate a file with the given text content.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        return True, None
    except OSError as e:
        return False, str(e)


def safe_write_text(path: str, content: str) -> Tuple[bool, Optional[str]]:
    """
    Replace a file's content via a sibling temp file and an atomic rename.

    The permission bits of an existing target are carried over, so an
    executable script stays executable. A target the caller may not write
    is refused rather than replaced, and a hard-linked target is rewritten
    in place so every link sees the new content.

    Args:
        path: Target file path.
        content: Full new text content.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    if os.path.exists(path):
        if not os.access(path, os.W_OK):
            return False, f"Permission denied: '{path}'"
        if os.stat(path).st_nlink > 1:
            return write_text_file(path, content)

    directory = os.path.dirname(os.path.abspath(path))
    tmp_path: Optional[str] = None
    try:
        fd, tmp_path = tempfile.mkstemp(prefix=".licensegen-", dir=directory)
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        if os.path.exists(path):
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
        return True, None
    except OSError as e:
        if tmp_path and os.path.exists(tmp_path):
            try:
                os.remove(tmp_path)
            except OSError:
                logger.debug(f"Could not remove temp file {tmp_path}")
        return False, str(e)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _safe_is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _safe_is_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file(follow_symlinks=False)
    except OSError:
        return False
