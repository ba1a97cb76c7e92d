#!/usr/bin/env python3
"""
Formatting helpers for mmom diagnostics.

- One-line messages for Pydantic v2 `ValidationError`s raised while
  validating the config file.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, List


# --- Public API --- #

def format_pydantic_errors_simple(exc: Exception) -> List[str]:
    """
    Return one-line messages from a Pydantic v2 ValidationError.

    Example:
        rich.extra_metadata[1]: Input should be a valid string

    Falls back to the first line of str(exc) if `exc.errors()` isn't available.
    """
    errors = exc.errors() if callable(getattr(exc, "errors", None)) else None
    if not errors:
        text = str(exc)
        return [text.splitlines()[0] if text else type(exc).__name__]
    return [f"{_format_error_loc(err.get('loc', ()))}: {err.get('msg', 'Validation error')}" for err in errors]


def describe_config_errors(path: Path, exc: Exception) -> str:
    """Build the ConfigLoadError message for an invalid config file."""
    lines = [f"Invalid config file {str(path)!r}:"]
    lines.extend(f"  - {msg}" for msg in format_pydantic_errors_simple(exc))
    return "\n".join(lines)


# --- Internals --- #

def _format_error_loc(loc: Iterable[Any]) -> str:
    """Render a pydantic `loc` as it would be written in the config file, e.g. rich.extra_metadata[1]."""
    path = ""
    for seg in loc:
        if isinstance(seg, int):
            path += f"[{seg}]"
        else:
            path += f".{seg}" if path else str(seg)
    return path or "<root>"
