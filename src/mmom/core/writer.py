#!/usr/bin/env python3
"""
Writes rendered documents to disk.

Existence is enforced by the open mode itself ('xb' is an atomic exclusive
create), never by a separate existence check.
"""

import logging
from pathlib import Path

from mmom.core.errors import DocumentExistsError, FileWriteError

logger = logging.getLogger(__name__)


def write_document(path: Path, content: bytes, *, overwrite: bool = False) -> None:
    """
    Write 'content' to 'path'.

    Args:
        path: Target document.
        content: Rendered bytes.
        overwrite: Truncate an existing file instead of refusing to touch it.

    Raises:
        DocumentExistsError: 'path' exists and 'overwrite' is False.
        FileWriteError: any other I/O failure. A partially written file is left as-is.
    """
    path = Path(path)
    if overwrite:
        logger.info("Overwriting flag set; overwriting %s if it exists", path)
        mode = "wb"
    else:
        logger.info("Not overwriting; creating %s", path)
        mode = "xb"

    try:
        with path.open(mode) as f:
            f.write(content)
            f.flush()
    except FileExistsError as e:
        raise DocumentExistsError(f"File already exists: {path}. Use -o to overwrite") from e
    except OSError as e:
        raise FileWriteError(f"Error writing {path}: {e}") from e

    logger.info("Wrote %d bytes to %s", len(content), path)
