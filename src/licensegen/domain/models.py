from __future__ import annotations

"""
Filesystem and Header Domain Models.

Defines the explicit result variants returned by the filesystem layer and
the ephemeral records consumed by the header injection subsystem. Failure
is modelled as a value (an 'Inaccessible'/'Unreadable' variant) so that
callers can branch on it instead of catching exceptions.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Union

# -----------------------------------------------------------------------------
# DIRECTORY LISTING VARIANTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectoryEntry:
    """
    A single node observed while listing a directory.

    Attributes:
        name: Entry name (no path separators).
        path: Entry path joined onto the listed directory.
        is_dir: True for a real directory (symlinks are not followed).
        is_file: True for a regular file (symlinks are not followed).
    """
    name: str
    path: str
    is_dir: bool
    is_file: bool


@dataclass(frozen=True)
class DirectoryEntries:
    """Successful listing of a directory, in enumeration order."""
    path: str
    entries: Tuple[DirectoryEntry, ...] = ()


@dataclass(frozen=True)
class InaccessibleDirectory:
    """A directory that could not be listed (permissions, missing, not a dir)."""
    path: str
    reason: str


DirectoryListing = Union[DirectoryEntries, InaccessibleDirectory]

# -----------------------------------------------------------------------------
# FILE CONTENT VARIANTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TextContent:
    """Decoded text content of a file."""
    path: str
    text: str


@dataclass(frozen=True)
class UnreadableFile:
    """A file whose content could not be read or decoded as UTF-8."""
    path: str
    reason: str


FileContent = Union[TextContent, UnreadableFile]

# -----------------------------------------------------------------------------
# HEADER AND GENERATION RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class HeaderRecord:
    """
    Values rendered into an SPDX header block.

    Attributes:
        spdx: SPDX license identifier (e.g. 'MIT').
        name: Copyright holder.
        year: Copyright year, kept as text.
    """
    spdx: str
    name: str
    year: str


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of a license generation run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        license_key: Catalogue key of the selected license.
        license_name: Human readable license name.
        spdx: SPDX identifier of the selected license.
        author: Copyright holder written into the text.
        year: Copyright year written into the text.
        output: Output file name as supplied by the caller.
        output_path: Absolute path of the LICENSE file.
        content: Rendered license text.
        written: Whether the LICENSE file was physically written.
        headers_added: Number of source files that received a header.
        header_files: Files matched by the header globs.
    """
    ok: bool
    error: str = ""

    license_key: str = ""
    license_name: str = ""
    spdx: str = ""
    author: str = ""
    year: str = ""

    output: str = ""
    output_path: str = ""
    content: str = ""
    written: bool = False

    headers_added: int = 0
    header_files: List[str] = field(default_factory=list)

    def to_json_payload(self) -> Dict[str, str]:
        """Shape used by '--json' output for a generation run."""
        return {
            "license": self.spdx,
            "name": self.license_name,
            "author": self.author,
            "year": self.year,
            "file": self.output,
            "content": self.content,
        }


def create_error_result(error: str, **kwargs: str) -> GenerationResult:
    """Build a failed GenerationResult carrying the given message."""
    return GenerationResult(ok=False, error=error, **kwargs)
