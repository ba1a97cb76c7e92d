#!/usr/bin/env python3
"""
Pydantic model for the metadata stamped into a new document.

`ResolvedMetadata` is built once per run by `mmom.core.resolver` from the CLI
input and the loaded `Config`, and is immutable afterwards.
"""

import datetime as dt
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mmom.core.annotated_types import Extension, RequiredText
from mmom.core.config import Config, RichMetadata
from mmom.core.constants import MARKDOWN_EXTENSION


class ResolvedMetadata(BaseModel):
    """
    Final values for one new document.

    Fields
    ------
    filestem:
        Filename without its extension. Never empty.
    author:
        Never empty; the OS username is the last fallback.
    datetime:
        Creation time with local UTC offset, captured once per run.
    extension:
        Optional extension without leading '.'.
    header, footer:
        Copied verbatim from the config.
    extra_metadata:
        Labels copied from the config's rich metadata, in order.

    Example
    -------
    >>> from datetime import datetime, timezone
    >>> md = ResolvedMetadata(
    ...     filestem="notes",
    ...     author="alice",
    ...     datetime=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    ...     extension="md",
    ... )
    >>> md.filename
    'notes.md'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    filestem: RequiredText
    author: RequiredText
    datetime: dt.datetime
    extension: Extension = None
    header: Optional[str] = None
    footer: Optional[str] = None
    extra_metadata: Optional[Tuple[str, ...]] = Field(default=None)

    # --- Validators --- #

    @field_validator("datetime")
    @classmethod
    def _require_offset(cls, v: dt.datetime) -> dt.datetime:
        """Naive timestamps are interpreted as local time."""
        return v if v.tzinfo is not None else v.astimezone()

    # --- Helpers --- #

    @property
    def filename(self) -> str:
        """'<filestem>.<extension>', or just the filestem when there is no extension."""
        return f"{self.filestem}.{self.extension}" if self.extension is not None else self.filestem

    @property
    def is_markdown(self) -> bool:
        return self.extension == MARKDOWN_EXTENSION

    def to_config(self) -> Config:
        """
        Project these values back into a `Config` so they become the stored
        defaults for the next run. The filestem is per-document and not kept.
        """
        return Config(
            author=self.author,
            header=self.header,
            footer=self.footer,
            extension=self.extension,
            rich=RichMetadata(extra_metadata=list(self.extra_metadata or ())),
        )
