#!/usr/bin/env python3
"""
Purpose:
    Wires the mmom pipeline together:

        load_config -> resolve_metadata -> render_document -> write_document
                                     \\-> (optional) save_config(metadata.to_config()), ahead of the write

    The config is passed explicitly; nothing here caches process-wide state.
"""
from __future__ import annotations

import getpass
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from mmom.core.config import Config, load_config, save_config
from mmom.core.constants import DEFAULT_TEXT_ENCODING
from mmom.core.errors import ConfigLoadError, MmomError
from mmom.core.metadata import ResolvedMetadata
from mmom.core.opener import Opener, open_documents
from mmom.core.render import render_document
from mmom.core.resolver import Clock, UsernameLookup, local_now, resolve_metadata
from mmom.core.writer import write_document

logger = logging.getLogger(__name__)


# --- Data model --- #

@dataclass(frozen=True)
class NewDocumentRequest:
    """Command-line input for one new document."""
    filename: str
    author: Optional[str] = None
    overwrite: bool = False
    enrich: bool = False
    open_after: bool = False
    save_config: bool = False


@dataclass(frozen=True)
class NewDocumentResult:
    """Outcome of a successful run."""
    path: Path
    metadata: ResolvedMetadata
    opened: Optional[bool] = None
    config_saved: bool = False


# --- Public API --- #

def create_document(
    request: NewDocumentRequest,
    config: Config,
    *,
    cwd: Path,
    opener: Optional[Opener] = None,
    clock: Clock = local_now,
    username: UsernameLookup = getpass.getuser,
) -> NewDocumentResult:
    """
    Resolve, render, and write one document into 'cwd'.

    Opening is attempted only when `request.open_after` is set and an
    opener is given; its failure is logged and does not raise.

    Raises:
        InvalidFilenameError, DocumentExistsError, FileWriteError
    """
    metadata = _resolve(request, config, clock=clock, username=username)
    return _write_and_open(request, metadata, cwd=cwd, opener=opener)


def run(
    request: NewDocumentRequest,
    *,
    config_path: Path,
    cwd: Path,
    opener: Optional[Opener] = None,
    clock: Clock = local_now,
    username: UsernameLookup = getpass.getuser,
) -> NewDocumentResult:
    """
    Full invocation: load the config at 'config_path', create the document,
    and write the resolved values back as defaults when requested.

    With `save_config`, the config is written before the document and its
    previous text is put back if the document can't be written, so a failed
    run leaves both files as they were.

    Raises:
        ConfigLoadError, InvalidFilenameError, DocumentExistsError, FileWriteError
    """
    config_path = Path(config_path)
    config = load_config(config_path)
    if not request.save_config:
        return create_document(request, config, cwd=cwd, opener=opener, clock=clock, username=username)

    metadata = _resolve(request, config, clock=clock, username=username)
    try:
        previous = config_path.read_text(encoding=DEFAULT_TEXT_ENCODING)
    except OSError as e:
        raise ConfigLoadError(f"Error reading config file {str(config_path)!r}: {e}") from e

    save_config(config_path, metadata.to_config())
    try:
        result = _write_and_open(request, metadata, cwd=cwd, opener=opener)
    except MmomError:
        _restore_config_text(config_path, previous)
        raise
    return replace(result, config_saved=True)


# --- Internals --- #

def _resolve(
    request: NewDocumentRequest,
    config: Config,
    *,
    clock: Clock,
    username: UsernameLookup,
) -> ResolvedMetadata:
    return resolve_metadata(
        request.filename,
        config,
        author=request.author,
        clock=clock,
        username=username,
    )


def _write_and_open(
    request: NewDocumentRequest,
    metadata: ResolvedMetadata,
    *,
    cwd: Path,
    opener: Optional[Opener],
) -> NewDocumentResult:
    path = Path(cwd) / metadata.filename
    write_document(path, render_document(metadata, enrich=request.enrich), overwrite=request.overwrite)

    opened: Optional[bool] = None
    if request.open_after:
        if opener is None:
            logger.warning("No opener available; not opening %s", path)
        else:
            logger.info("Trying to open %s with the default program", path)
            opened = open_documents([path], opener)

    return NewDocumentResult(path=path, metadata=metadata, opened=opened)


def _restore_config_text(path: Path, text: str) -> None:
    """Put back the config text saved before a failed run; a failure here is only logged."""
    try:
        path.write_text(text, encoding=DEFAULT_TEXT_ENCODING)
    except OSError as e:
        logger.error("Could not restore config file %s: %s", path, e)
    else:
        logger.info("Restored previous config file %s", path)
