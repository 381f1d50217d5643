from __future__ import annotations

"""
Option Validation Service.

Gatekeeper between untrusted option sources (CLI flags, the JSON config
file, library callers passing dicts) and ``build_scan_options``. Coerces
types, drops malformed values and reports every correction as a warning.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from templatetree.domain.config import get_default_config

logger = logging.getLogger(__name__)

_LIST_FIELDS = ("ignore_file_names", "ignore_folder_names", "ignore_patterns")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_options(
        options: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a raw option dictionary.

    Args:
        options: Raw option data (usually a dictionary).
        strict: If True, raise on invalid input instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Keyword arguments suitable for
                                          ``build_scan_options`` and the
                                          list of warnings produced.

    Raises:
        TypeError: In strict mode, on a type mismatch.
        ValueError: In strict mode, on an invalid size or regex.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if options is None:
        return defaults, warnings

    if not isinstance(options, dict):
        msg = f"Invalid options type: expected dict, received {type(options).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    for key in defaults:
        if key in options:
            merged[key] = options[key]

    unknown = sorted(set(options) - set(defaults))
    for key in unknown:
        warnings.append(f"Unknown option '{key}' ignored.")

    for name in _LIST_FIELDS:
        merged[name] = _as_list_str(merged.get(name), name, warnings, strict)

    merged["ignore_patterns"] = _valid_patterns(merged["ignore_patterns"], warnings, strict)
    merged["max_file_size"] = _as_size(merged.get("max_file_size"), warnings, strict)

    for w in warnings:
        logger.debug(f"Option correction: {w}")

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_list_str(value: Any, field: str, warnings: List[str], strict: bool) -> List[str]:
    """Accept a list of strings or a comma-separated string."""
    if value is None:
        return []

    if isinstance(value, str):
        return [x.strip() for x in value.split(",") if x.strip()]

    if isinstance(value, (list, tuple, set)):
        out: List[str] = []
        for item in value:
            if isinstance(item, str) and item.strip():
                out.append(item.strip())
            else:
                msg = f"Invalid entry in '{field}': {item!r}."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Dropped.")
        return out

    msg = f"Invalid field '{field}': expected list of str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Ignored.")
    return []


def _valid_patterns(patterns: List[str], warnings: List[str], strict: bool) -> List[str]:
    """Drop expressions that do not compile."""
    out: List[str] = []
    for p in patterns:
        try:
            re.compile(p)
        except re.error as e:
            msg = f"Invalid ignore pattern {p!r}: {e}."
            if strict:
                raise ValueError(msg) from e
            warnings.append(f"{msg} Dropped.")
            continue
        out.append(p)
    return out


def _as_size(value: Any, warnings: List[str], strict: bool) -> Optional[int]:
    """Accept a non-negative integer (or numeric string); None keeps the default."""
    if value is None:
        return None

    if isinstance(value, bool):
        size = None
    elif isinstance(value, int):
        size = value
    elif isinstance(value, str) and value.strip().isdigit():
        size = int(value.strip())
    else:
        size = None

    if size is not None and size >= 0:
        return size

    msg = f"Invalid field 'max_file_size': {value!r} is not a non-negative integer."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using default.")
    return None
