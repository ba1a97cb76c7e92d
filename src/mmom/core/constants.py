#!/usr/bin/env python3
"""
Core constants used across mmom.

- File handling: config/log file names and default text encoding.
- Document layout: timestamp format and the markdown title marker.
- Environment: names of the variables that override file locations.
"""

from typing import Final

# --- File handling --- #

# Name of the persisted config file, stored beside the executable
CONFIG_FILENAME: Final[str] = "config.json"

# Name of the append-only run log
LOG_FILENAME: Final[str] = "mmomlog.log"

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"

# Filename used when none is given on the command line
DEFAULT_FILENAME: Final[str] = "momi_text"


# --- Document layout --- #

# Format of the `created:` line
DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Extension that triggers the markdown title marker
MARKDOWN_EXTENSION: Final[str] = "md"
MARKDOWN_TITLE_MARKER: Final[str] = "# "

# Extension written by `--create-config`
DEFAULT_CONFIG_EXTENSION: Final[str] = MARKDOWN_EXTENSION


# --- Environment overrides --- #

CONFIG_PATH_ENV: Final[str] = "MMOM_CONFIG_PATH"
LOG_DIR_ENV: Final[str] = "MMOM_LOG_DIR"
