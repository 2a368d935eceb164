from __future__ import annotations

"""
Configuration Validation Service.

Normalizes raw configuration (defaults, user file, CLI overrides) into a
strictly typed dictionary. Type mismatches are coerced back to defaults
and reported as warnings, or raised when strict mode is requested.
"""

import logging
import re
from typing import Any, Dict, List, Tuple

from licensegen.domain.config import get_default_config

logger = logging.getLogger(__name__)

_YEAR_RX = re.compile(r"^\d{4}$")

_STRING_FIELDS = ("license", "name", "year", "output", "base_dir")
_BOOL_FIELDS = ("force", "json_output", "dry_run")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: If True, raise TypeError on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["headers"] = _as_globs(merged.get("headers"), warnings, strict)

    if not merged["output"].strip():
        warnings.append("Empty output filename. Using default.")
        merged["output"] = defaults["output"]

    if not _YEAR_RX.match(merged["year"]):
        warnings.append(f"Year '{merged['year']}' is not a four-digit year.")

    return merged, warnings


# -----------------------------------------------------------------------------
# COERCION HELPERS
# -----------------------------------------------------------------------------

def _as_str(value: Any, default: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)

    msg = f"Invalid type for '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using default.")
    return default


def _as_bool(value: Any, default: bool, field: str, warnings: List[str], strict: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value

    msg = f"Invalid type for '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using default.")
    return default


def _as_globs(value: Any, warnings: List[str], strict: bool) -> List[str]:
    """Accept a list of globs or a comma-separated string of them."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return [v.strip() for v in value if v.strip()]

    msg = f"Invalid type for 'headers': expected list of str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Ignoring header globs.")
    return []
