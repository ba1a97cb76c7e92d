#!/usr/bin/env python3
"""
Renders the text of a new document from its `ResolvedMetadata`.

Layout (markdown title marker only when the extension is 'md'):

    # notes

    created: 2024-01-02 03:04:05
    author: alice

    tags:                <- only with enrich=True and extra metadata present
    status:

    <header>

    <footer>             <- no trailing newline
"""

from __future__ import annotations

from typing import List

from mmom.core.constants import DATETIME_FORMAT, DEFAULT_TEXT_ENCODING, MARKDOWN_TITLE_MARKER
from mmom.core.metadata import ResolvedMetadata


def render_document(metadata: ResolvedMetadata, *, enrich: bool = False) -> bytes:
    """Return the encoded document body for 'metadata'."""
    return render_document_text(metadata, enrich=enrich).encode(DEFAULT_TEXT_ENCODING)


def render_document_text(metadata: ResolvedMetadata, *, enrich: bool = False) -> str:
    parts: List[str] = []
    if metadata.is_markdown:
        parts.append(MARKDOWN_TITLE_MARKER)
    parts.append(f"{metadata.filestem}\n\n")
    parts.append(f"created: {metadata.datetime.strftime(DATETIME_FORMAT)}\n")
    parts.append(f"author: {metadata.author}\n\n")

    if enrich and metadata.extra_metadata is not None:
        parts.extend(f"{label}: \n" for label in metadata.extra_metadata)
        parts.append("\n")

    parts.append(f"{metadata.header or ''}\n")
    parts.append("\n")
    parts.append(metadata.footer or "")
    return "".join(parts)
