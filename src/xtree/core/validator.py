from __future__ import annotations

"""
Configuration Validation Service.

Ensures the configuration dictionary conforms to the expected schema before
a scan runs. Handles type coercion and default value injection so that bad
values in the persisted file or on the command line never abort a run.
"""

from typing import Any, Dict, List, Optional, Tuple

from xtree.domain.config import get_default_config

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: A tuple containing the normalized
                                          configuration and a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for field in ("sort_entries", "color"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in ("log_level", "log_file"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    depth = parse_depth(merged.get("max_depth"))
    if depth is None:
        msg = f"Invalid field 'max_depth': expected non-negative int, received {merged.get('max_depth')!r}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        depth = defaults["max_depth"]
    merged["max_depth"] = depth

    return merged, warnings


def parse_depth(value: Any) -> Optional[int]:
    """
    Interpret a depth value as a non-negative integer.

    Accepts ints and plain decimal strings with an optional leading "+".
    Surrounding whitespace, bools, negatives and anything else unparsable
    yield None so callers can substitute their default.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str):
        s = value
        if s.startswith("+"):
            s = s[1:]
        if not (s.isascii() and s.isdigit()):
            return None
        return int(s)
    return None


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
