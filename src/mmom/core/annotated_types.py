#!/usr/bin/env python3
"""
Purpose:
    Provides reusable annotated types and normalization helpers for mmom's
    Pydantic models: file extensions and required, non-empty text values.
"""

from typing import Any, Annotated, Optional
from pydantic import BeforeValidator

from mmom.core.utils import strip_extension_separator


# --- Normalizers --- #

def _normalize_extension(v: Any) -> Optional[str]:
    """
    Normalize a file extension:
    - None stays None (unset)
    - leading '.' separators are dropped ('.md' -> 'md')
    - everything else, including case, is preserved
    """
    if v is None:
        return None
    if not isinstance(v, str):
        raise ValueError(f"Extension must be a string, got {type(v).__name__}")
    return strip_extension_separator(v)


def _require_text(v: Any) -> str:
    """
    Require a non-empty string. Content is kept verbatim (no trimming), only
    all-whitespace values are rejected.
    """
    if not isinstance(v, str) or not v.strip():
        raise ValueError("Value must be a non-empty string")
    return v


# --- Reusable Annotated types --- #

Extension = Annotated[Optional[str], BeforeValidator(_normalize_extension)]
RequiredText = Annotated[str, BeforeValidator(_require_text)]
