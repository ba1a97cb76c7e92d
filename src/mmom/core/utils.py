#!/usr/bin/env python3
"""
Purpose:
    Provides small filename and JSON file I/O helpers for mmom.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from mmom.core.constants import DEFAULT_TEXT_ENCODING


# --- Filename Helpers --- #

def filename_stem(filename: str) -> str:
    """Return the final path component without its last suffix ('' if there is none)."""
    return Path(filename).stem if filename else ""


def filename_extension(filename: str) -> Optional[str]:
    """
    Return the last suffix of 'filename' without the leading dot, or None.

    Dotfiles such as '.txt' have no suffix, matching `pathlib` semantics.
    """
    suffix = Path(filename).suffix if filename else ""
    return suffix[1:] if suffix else None


def strip_extension_separator(ext: Optional[str]) -> Optional[str]:
    """Drop leading '.' characters from an extension; None stays None."""
    if ext is None:
        return None
    return ext.lstrip(".")


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON object from 'path'.

    Raises:
        FileNotFoundError: if the file is missing.
        ValueError: if the file contains invalid JSON or a non-object top level.
    """
    with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(
                f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
            ) from e
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {str(path)!r}, got {type(data).__name__}")
    return data


def dump_json_text(payload: Dict[str, Any]) -> str:
    """Serialize 'payload' as pretty-printed JSON (2-space indent, key order kept)."""
    return json.dumps(payload, indent=2, ensure_ascii=False)
