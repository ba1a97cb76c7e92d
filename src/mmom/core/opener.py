#!/usr/bin/env python3
"""
Opens documents with the platform's default application.

The pipeline depends only on the `Opener` protocol so tests can pass a stub.
"""
from __future__ import annotations

import logging
import os
import platform
import subprocess  # nosec B404 - needed to launch the desktop opener
from pathlib import Path
from typing import Iterable, Protocol

from mmom.core.errors import OpenerError

logger = logging.getLogger(__name__)


class Opener(Protocol):
    def open(self, path: Path) -> None:
        """Open 'path'; raise `OpenerError` on failure."""
        ...


class SystemOpener:
    """Default-application opener: `os.startfile` on Windows, `open` on macOS, `xdg-open` elsewhere."""

    def open(self, path: Path) -> None:
        system = platform.system()
        try:
            if system == "Windows":
                os.startfile(str(path))  # type: ignore[attr-defined]
                return
            command = "open" if system == "Darwin" else "xdg-open"
            subprocess.run(  # nosec B603
                [command, str(path)],
                check=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b"").decode(errors="replace").strip()
            raise OpenerError(f"{e.cmd[0]} exited with {e.returncode}: {stderr}") from e
        except OSError as e:
            raise OpenerError(str(e)) from e


def open_documents(paths: Iterable[Path], opener: Opener) -> bool:
    """
    Open each of 'paths'. Failures are logged and never raised.

    Returns:
        True if every path opened.
    """
    ok = True
    for path in paths:
        try:
            opener.open(path)
        except OpenerError as e:
            logger.error("Error opening %s: %s", path, e)
            ok = False
        else:
            logger.info("Opened %s", path)
    return ok
