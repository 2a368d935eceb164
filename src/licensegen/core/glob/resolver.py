from __future__ import annotations

"""
Glob Path Resolver.

Walks the filesystem from a base directory, consuming one '/'-separated
pattern segment per directory level. The traversal state is an explicit
(directory listing, segment cursor) pair, which keeps the two expansions of
the recursive '**' segment visible:

  - zero levels: the same listing is re-evaluated against the next segment;
  - one more level: every sub-directory is visited with the cursor unchanged.

Directories that cannot be listed contribute nothing. Only regular files
are ever produced.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from licensegen.core.glob.matcher import match_segment
from licensegen.domain.constants import GLOB_SEPARATOR, RECURSIVE_SEGMENT
from licensegen.domain.models import DirectoryEntries, InaccessibleDirectory
from licensegen.infra.fs import list_directory

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def split_pattern(pattern: str) -> Tuple[str, ...]:
    """
    Split a glob string into its segments.

    The separator is always '/', regardless of the host platform. No
    normalization of '.', '..' or empty segments is performed.
    """
    return tuple(pattern.split(GLOB_SEPARATOR))


def walk_pattern(segments: Sequence[str], base_dir: str) -> Iterator[str]:
    """
    Lazily yield the file paths matching the segments below base_dir.

    The same path may be yielded more than once when several '**' segments
    can absorb the same directories; see resolve_pattern for the
    de-duplicated form.

    Args:
        segments: Parsed pattern segments.
        base_dir: Directory the pattern is anchored to.

    Yields:
        str: Paths built by joining base_dir with the matched entries.
    """
    segments = tuple(segments)
    if not segments:
        return
    yield from _walk(segments, base_dir, 0)


def resolve_pattern(pattern: str, base_dir: str) -> List[str]:
    """
    Resolve a single glob pattern into the list of matching files.

    Args:
        pattern: Forward-slash separated glob (e.g. 'src/**/*.ts').
        base_dir: Directory the pattern is anchored to.

    Returns:
        List[str]: Matching file paths, each listed once, in first-seen order.
    """
    results = _unique(walk_pattern(split_pattern(pattern), base_dir))
    logger.debug(f"Pattern '{pattern}' matched {len(results)} file(s) under {base_dir}")
    return results


def resolve_patterns(patterns: Iterable[str], base_dir: str) -> List[str]:
    """
    Resolve several glob patterns, concatenating their results.

    A file matched by more than one pattern is listed once, at the position
    of its first match.
    """
    found: List[str] = []
    for pattern in patterns:
        found.extend(resolve_pattern(pattern, base_dir))
    return _unique(found)


# ==============================================================================
# TRAVERSAL
# ==============================================================================

def _walk(segments: Tuple[str, ...], directory: str, cursor: int) -> Iterator[str]:
    """List a directory and evaluate its entries at the given cursor."""
    if cursor >= len(segments):
        return

    listing = list_directory(directory)
    if isinstance(listing, InaccessibleDirectory):
        logger.debug(f"Skipping unreadable directory {listing.path}: {listing.reason}")
        return

    yield from _visit(segments, listing, cursor)


def _visit(segments: Tuple[str, ...], listing: DirectoryEntries, cursor: int) -> Iterator[str]:
    """Evaluate an already-read listing against segments[cursor]."""
    if cursor >= len(segments):
        return

    segment = segments[cursor]
    is_last = cursor == len(segments) - 1

    if segment == RECURSIVE_SEGMENT:
        yield from _expand_recursive(segments, listing, cursor, is_last)
        return

    for entry in listing.entries:
        if not match_segment(entry.name, segment):
            continue
        if is_last:
            if entry.is_file:
                yield entry.path
        elif entry.is_dir:
            yield from _walk(segments, entry.path, cursor + 1)


def _expand_recursive(
        segments: Tuple[str, ...],
        listing: DirectoryEntries,
        cursor: int,
        is_last: bool,
) -> Iterator[str]:
    """Apply both expansions of '**' to one listing."""
    # Zero levels. A trailing '**' matches every file at this level.
    if is_last:
        for entry in listing.entries:
            if entry.is_file:
                yield entry.path
    else:
        yield from _visit(segments, listing, cursor + 1)

    # One more level, same segment.
    for entry in listing.entries:
        if entry.is_dir:
            yield from _walk(segments, entry.path, cursor)


def _unique(paths: Iterable[str]) -> List[str]:
    seen: Dict[str, None] = {}
    for p in paths:
        seen.setdefault(p, None)
    return list(seen)
