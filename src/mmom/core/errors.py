#!/usr/bin/env python3
"""
Exception types raised by the mmom engine.

Everything fatal derives from `MmomError`, so the CLI can map the whole family
to a non-zero exit code. Where a builtin exception already describes the
condition, the mmom type also inherits from it.
"""


class MmomError(Exception):
    """Base class for mmom errors."""


class ConfigLoadError(MmomError):
    """Config file is unreadable, not JSON, or not a valid config object."""


class ConfigExistsError(MmomError, FileExistsError):
    """`--create-config` was asked to create a config file that already exists."""


class InvalidFilenameError(MmomError, ValueError):
    """The requested filename has no usable stem."""


class DocumentExistsError(MmomError, FileExistsError):
    """Target document exists and overwriting was not requested."""


class FileWriteError(MmomError, OSError):
    """Writing the document or the config file failed."""


class OpenerError(MmomError):
    """Opening a document with the default application failed. Never fatal."""
