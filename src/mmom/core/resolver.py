#!/usr/bin/env python3
"""
Purpose:
    Resolves the metadata for a new document from the command-line input and
    the loaded config, using fixed precedence rules:

        extension: filename suffix > config.extension > none
        author:    --author > config.author > OS username

    The clock and the username lookup are injectable so resolution can be
    tested without touching the environment.
"""
from __future__ import annotations

import datetime as dt
import getpass
import logging
from pathlib import Path
from typing import Callable, Optional

from mmom.core.config import Config
from mmom.core.errors import InvalidFilenameError
from mmom.core.metadata import ResolvedMetadata
from mmom.core.utils import filename_extension, filename_stem

logger = logging.getLogger(__name__)

Clock = Callable[[], dt.datetime]
UsernameLookup = Callable[[], str]


def local_now() -> dt.datetime:
    """Current wall-clock time with the local UTC offset."""
    return dt.datetime.now().astimezone()


# --- Public API --- #

def resolve_metadata(
    filename: str,
    config: Config,
    *,
    author: Optional[str] = None,
    clock: Clock = local_now,
    username: UsernameLookup = getpass.getuser,
) -> ResolvedMetadata:
    """
    Build the `ResolvedMetadata` for 'filename'.

    Args:
        filename:
            Filename as given on the command line. Only its last component is used.
        config:
            Loaded defaults.
        author:
            Explicit author override (highest precedence).
        clock:
            Returns the creation timestamp; called exactly once.
        username:
            Returns the OS user name; only called when no other author is known.

    Raises:
        InvalidFilenameError: 'filename' has no usable stem.
    """
    filestem = determine_filestem(filename)
    resolved = ResolvedMetadata(
        filestem=filestem,
        author=determine_author(author, config, username),
        datetime=clock(),
        extension=determine_extension(filename, config),
        header=config.header,
        footer=config.footer,
        extra_metadata=config.rich_metadata,
    )
    logger.info("Resolved metadata for %s", resolved.filename)
    return resolved


def determine_filestem(filename: str) -> str:
    """
    Return the filestem of 'filename'.

    Bare extensions ('.txt'), '.', '..', empty and all-whitespace names have no stem.
    """
    name = Path(filename).name if filename else ""
    stem = filename_stem(name)
    if not stem.strip() or name in (".", "..") or (name.startswith(".") and "." not in name[1:]):
        raise InvalidFilenameError(f"Filename {filename!r} has no usable stem")
    return stem


def determine_extension(filename: str, config: Config) -> Optional[str]:
    """
    Return the extension for the new document.

    - A suffix on the filename always wins.
    - Otherwise the config extension, if set.
    - Otherwise no extension.
    """
    ext = filename_extension(Path(filename).name)
    if ext is not None:
        logger.info("Extension provided: %s", ext)
        return ext
    if config.extension is not None:
        logger.info("Extension not provided; using extension from config: %s", config.extension)
        return config.extension
    logger.warning("Extension not found in config file; not using an extension")
    return None


def determine_author(author: Optional[str], config: Config, username: UsernameLookup = getpass.getuser) -> str:
    """
    Return the author for the new document.

    - An explicit override always wins.
    - Otherwise the config author, if set.
    - Otherwise the current OS user.

    A blank author can't be stamped into a document, so a blank value from
    either source is skipped with a warning.
    """
    if author is not None:
        if author.strip():
            logger.info("Author provided: %s", author)
            return author
        logger.warning("Ignoring blank --author value")
    if config.author is not None:
        if config.author.strip():
            logger.info("Author not provided; using author from config: %s", config.author)
            return config.author
        logger.warning("Ignoring blank author in config file")
    logger.warning("Author not found in config file; using current user as author")
    return username()
