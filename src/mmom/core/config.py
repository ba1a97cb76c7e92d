#!/usr/bin/env python3
"""
mmom configuration store.

The config file holds per-installation defaults for new documents. It lives
beside the executable (or at `$MMOM_CONFIG_PATH`) and is a JSON object with
optional keys:

    {
      "author": "alice",
      "header": "...",
      "footer": "...",
      "extension": "md",
      "rich": {"extra_metadata": ["tags", "status"]}
    }

A missing key means "unset, defer to the next source"; it is never read as
an empty string. Keys this version does not know are ignored with a warning,
so a file written by a newer release still loads.
"""

import getpass
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mmom.core.annotated_types import Extension
from mmom.core.constants import (
    CONFIG_FILENAME,
    CONFIG_PATH_ENV,
    DEFAULT_CONFIG_EXTENSION,
    DEFAULT_TEXT_ENCODING,
)
from mmom.core.errors import ConfigExistsError, ConfigLoadError, FileWriteError
from mmom.core.formatting import describe_config_errors
from mmom.core.utils import dump_json_text, load_json_file

logger = logging.getLogger(__name__)

BLANK_CONFIG_TEXT = "{}"


# --- Data model --- #

class RichMetadata(BaseModel):
    """Extra labeled fields rendered with blank values when enrichment is requested."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    extra_metadata: List[str] = Field(
        default_factory=list,
        description="Ordered labels of user-defined metadata fields.",
    )


class Config(BaseModel):
    """
    Persisted default values for new documents.

    Every field is optional. `None` means unset; an empty string is a real
    value and wins over later fallbacks.

    Example
    -------
    >>> cfg = Config.model_validate({"author": "alice", "extension": ".md"})
    >>> cfg.extension
    'md'
    >>> cfg.header is None
    True
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    filestem: Optional[str] = Field(default=None, description="Default filestem (informational).")
    author: Optional[str] = Field(default=None, description="Default author.")
    header: Optional[str] = Field(default=None, description="Text written after the metadata block.")
    footer: Optional[str] = Field(default=None, description="Text written at the end of the document.")
    extension: Extension = Field(default=None, description="Default extension, without leading '.'.")
    rich: Optional[RichMetadata] = Field(default=None, description="Rich metadata settings.")

    @property
    def rich_metadata(self) -> Optional[List[str]]:
        """Extra metadata labels, or None when the `rich` section is unset."""
        if self.rich is None:
            return None
        return list(self.rich.extra_metadata)

    def to_json_text(self) -> str:
        """Pretty-printed JSON with unset fields omitted."""
        return dump_json_text(self.model_dump(mode="json", exclude_none=True))


# --- Locations --- #

def default_config_path() -> Path:
    """
    Return the config file location.

    Order:
        1. $MMOM_CONFIG_PATH
        2. config.json in the directory of the running executable
    """
    override = os.getenv(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    exe = Path(sys.argv[0]) if sys.argv and sys.argv[0] else None
    base = exe.resolve().parent if exe is not None else Path.cwd()
    return base / CONFIG_FILENAME


# --- Public API --- #

def load_config(path: Path) -> Config:
    """
    Load the config file at 'path', bootstrapping a blank one if it is missing.

    Raises:
        ConfigLoadError: the file cannot be created, read, parsed, or validated.
    """
    path = Path(path)
    if _create_blank_if_missing(path):
        logger.warning("Config file not found; created a blank one at %s", path)

    try:
        raw = load_json_file(path)
    except (OSError, ValueError) as e:
        raise ConfigLoadError(f"Error loading config file {str(path)!r}: {e}") from e

    try:
        config = Config.model_validate(raw)
    except ValidationError as e:
        raise ConfigLoadError(describe_config_errors(path, e)) from e

    for key in _unknown_keys(raw):
        logger.warning("Ignoring unknown config key %r in %s", key, path)
    logger.info("Config loaded from %s", path)
    return config


def save_config(path: Path, config: Config) -> None:
    """
    Write 'config' to 'path' as pretty-printed JSON, replacing any existing file.

    Raises:
        FileWriteError: on any I/O failure.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(config.to_json_text(), encoding=DEFAULT_TEXT_ENCODING)
    except OSError as e:
        raise FileWriteError(f"Error writing config file {str(path)!r}: {e}") from e
    logger.info("Config saved to %s", path)


def default_config(username: Optional[str] = None) -> Config:
    """Config written by `--create-config`: every key present so users can edit it."""
    return Config(
        author=username or getpass.getuser(),
        header="",
        footer="",
        extension=DEFAULT_CONFIG_EXTENSION,
        rich=RichMetadata(),
    )


def create_default_config_file(path: Path, *, username: Optional[str] = None) -> Config:
    """
    Create a default config file at 'path'. Never replaces an existing file.

    Raises:
        ConfigExistsError: 'path' already exists.
        FileWriteError: on any other I/O failure.
    """
    path = Path(path)
    config = default_config(username)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("x", encoding=DEFAULT_TEXT_ENCODING) as f:
            f.write(config.to_json_text())
    except FileExistsError as e:
        raise ConfigExistsError(f"Config file already exists: {path}") from e
    except OSError as e:
        raise FileWriteError(f"Error creating config file {str(path)!r}: {e}") from e
    logger.info("Default config created at %s", path)
    return config


# --- Internals --- #

def _create_blank_if_missing(path: Path) -> bool:
    """
    Exclusively create 'path' holding '{}'. Returns False if it already exists,
    including when another process created it first.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("x", encoding=DEFAULT_TEXT_ENCODING) as f:
            f.write(BLANK_CONFIG_TEXT)
    except FileExistsError:
        return False
    except OSError as e:
        raise ConfigLoadError(f"Error creating config file {str(path)!r}: {e}") from e
    return True


def _unknown_keys(raw: dict) -> List[str]:
    """Dotted names of keys in 'raw' that this version does not understand."""
    unknown = [k for k in raw if k not in Config.model_fields]
    rich = raw.get("rich")
    if isinstance(rich, dict):
        unknown.extend(f"rich.{k}" for k in rich if k not in RichMetadata.model_fields)
    return unknown
