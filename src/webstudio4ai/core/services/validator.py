from __future__ import annotations

"""
Configuration Validation Service.

Ensures that the configuration dictionary conforms to the expected schema
before the studio starts. Handles type coercion, path normalization, and
default value injection.
"""

import logging
from typing import Any, Dict, List, Tuple

from webstudio4ai.domain.config import get_default_config
from webstudio4ai.infra.fs import normalize_path
from webstudio4ai.infra.logging.config import _LEVEL_MAP

logger = logging.getLogger(__name__)


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

    Converts untrusted inputs (CLI flags, hand-edited JSON) into strictly
    typed parameters. Fills missing keys with domain defaults.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and a
                                          list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Schema Definition
    string_fields = ["model_id", "api_key_env", "preview_path", "export_dir", "log_level"]
    bool_fields = ["save_log_file"]

    # 3. Field Processing
    for field in string_fields:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in bool_fields:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    # 4. Domain-Specific Normalization
    merged["preview_path"] = normalize_path(merged["preview_path"], defaults["preview_path"])
    merged["export_dir"] = normalize_path(merged["export_dir"], defaults["export_dir"])
    merged["log_level"] = _normalize_level(merged["log_level"], warnings, strict)

    return merged, warnings


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
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _normalize_level(level: str, warnings: List[str], strict: bool) -> str:
    """Ensure the log level is one the logging subsystem understands."""
    lvl = level.strip().upper()
    if lvl in _LEVEL_MAP:
        return lvl

    msg = f"Unknown log level '{level}'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using INFO.")
    return "INFO"
