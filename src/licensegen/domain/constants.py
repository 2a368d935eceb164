from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed strings shared by the generator, the header
injector and the CLI.
"""

CONFIG_DIR_NAME = "licensegen"
UNIX_CONFIG_DIR_NAME = ".licensegen"
CONFIG_FILE_NAME = "config.json"
CONFIG_ENV_VAR = "LICENSEGEN_CONFIG"

DEFAULT_OUTPUT = "LICENSE"
FALLBACK_AUTHOR = "Your Name"

SPDX_MARKER = "SPDX-License-Identifier"
SHEBANG = "#!"
# Lines that must stay first in a file: interpreter, XML and PHP openers
LEADING_DIRECTIVES = (SHEBANG, "<?xml", "<?php")
GLOB_SEPARATOR = "/"
RECURSIVE_SEGMENT = "**"
