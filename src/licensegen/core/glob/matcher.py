from __future__ import annotations

"""
Wildcard Segment Matcher.

Decides whether a single directory entry name satisfies one glob segment.
Only '*' (any run of characters, possibly empty) and '?' (exactly one
character) are special; everything else is matched literally.
"""

import functools
import re


@functools.lru_cache(maxsize=256)
def compile_segment(segment: str) -> re.Pattern:
    """
    Translate a wildcard segment into an anchored, case-sensitive regex.

    Args:
        segment: Glob segment such as '*.ts' or 'a?c'.

    Returns:
        re.Pattern: Compiled expression matching whole names only.
    """
    parts = []
    for ch in segment:
        if ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return re.compile("".join(parts), re.DOTALL)


def match_segment(name: str, segment: str) -> bool:
    """
    Return True if the entry name satisfies the wildcard segment.

    >>> match_segment("foo.ts", "*.ts")
    True
    >>> match_segment("aXb", "a.b")
    False
    """
    return compile_segment(segment).fullmatch(name) is not None
