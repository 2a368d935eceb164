from __future__ import annotations

"""
Comment Syntax Registry.

Maps source file names to the line comment syntax used when rendering an
SPDX header, so the inserted block stays valid code in the target language.
"""

import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

# -----------------------------------------------------------------------------
# STYLE MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CommentStyle:
    """
    Line comment delimiters.

    Attributes:
        prefix: Text opening the comment (e.g. '//').
        suffix: Text closing the comment, empty for line comments.
    """
    prefix: str
    suffix: str = ""

    def wrap(self, text: str) -> str:
        """Render one comment line around text."""
        if self.suffix:
            return f"{self.prefix} {text} {self.suffix}"
        return f"{self.prefix} {text}"


SLASH = CommentStyle("//")
HASH = CommentStyle("#")
DASH = CommentStyle("--")
PERCENT = CommentStyle("%")
SEMICOLON = CommentStyle(";;")
BLOCK = CommentStyle("/*", "*/")
MARKUP = CommentStyle("<!--", "-->")

DEFAULT_STYLE = SLASH

# -----------------------------------------------------------------------------
# REGISTRY
# -----------------------------------------------------------------------------

_EXTENSION_STYLES: Mapping[str, CommentStyle] = MappingProxyType({
    **{ext: HASH for ext in (
        ".py", ".pyi", ".pyx", ".sh", ".bash", ".zsh", ".fish", ".rb", ".pl",
        ".pm", ".r", ".yaml", ".yml", ".toml", ".ps1", ".cmake", ".tf", ".nim",
    )},
    **{ext: DASH for ext in (".lua", ".sql", ".hs", ".elm", ".ada")},
    **{ext: PERCENT for ext in (".tex", ".erl", ".m")},
    **{ext: SEMICOLON for ext in (".lisp", ".clj", ".cljs", ".el", ".scm")},
    **{ext: BLOCK for ext in (".css",)},
    **{ext: MARKUP for ext in (".html", ".htm", ".xml", ".svg", ".vue", ".md")},
})

_FILENAME_STYLES: Mapping[str, CommentStyle] = MappingProxyType({
    "Makefile": HASH,
    "Dockerfile": HASH,
    "CMakeLists.txt": HASH,
    "Gemfile": HASH,
    "Rakefile": HASH,
})


def comment_style_for(path: str) -> CommentStyle:
    """
    Select the comment style for a file from its name or extension.

    Unknown extensions fall back to '//' comments.
    """
    file_name = os.path.basename(path)
    if file_name in _FILENAME_STYLES:
        return _FILENAME_STYLES[file_name]

    _, ext = os.path.splitext(file_name)
    return _EXTENSION_STYLES.get(ext.lower(), DEFAULT_STYLE)
