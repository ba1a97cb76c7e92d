#!/usr/bin/env python3
import logging
from datetime import datetime, timezone
import pytest

from mmom.core import resolver
from mmom.core.config import Config, RichMetadata
from mmom.core.errors import InvalidFilenameError

STAMP = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def _clock():
    return STAMP


def _user():
    return "osuser"


def _no_user():
    raise AssertionError("username lookup should not be needed")


# --- Filestem --- #

@pytest.mark.parametrize("filename,expected", [
    ("notes.md", "notes"),
    ("notes", "notes"),
    ("archive.tar.gz", "archive.tar"),
    ("sub/dir/report.txt", "report"),
])
def test_determine_filestem(filename, expected):
    assert resolver.determine_filestem(filename) == expected


@pytest.mark.parametrize("filename", ["", ".txt", ".", "..", "dir/.md", "   .md", " "])
def test_determine_filestem_without_stem_raises(filename):
    with pytest.raises(InvalidFilenameError, match="no usable stem"):
        resolver.determine_filestem(filename)


# --- Extension precedence --- #

@pytest.mark.parametrize("config", [Config(), Config(extension="txt"), Config(extension="")])
def test_filename_extension_always_wins(config):
    assert resolver.determine_extension("notes.md", config) == "md"


def test_config_extension_used_when_filename_has_none():
    assert resolver.determine_extension("notes", Config(extension="txt")) == "txt"


def test_no_extension_anywhere():
    assert resolver.determine_extension("notes", Config()) is None


def test_missing_extension_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="mmom"):
        resolver.determine_extension("notes", Config())
    assert "not using an extension" in caplog.text


# --- Author precedence --- #

@pytest.mark.parametrize("config", [Config(), Config(author="configuser")])
def test_cli_author_always_wins(config):
    assert resolver.determine_author("cliuser", config, _no_user) == "cliuser"


def test_config_author_used_without_override():
    assert resolver.determine_author(None, Config(author="configuser"), _no_user) == "configuser"


def test_os_username_fallback():
    assert resolver.determine_author(None, Config(), _user) == "osuser"


def test_blank_cli_author_falls_through_to_config():
    assert resolver.determine_author("  ", Config(author="configuser"), _no_user) == "configuser"


def test_blank_config_author_falls_through_to_os_user():
    assert resolver.determine_author(None, Config(author=""), _user) == "osuser"


# --- resolve_metadata --- #

def test_resolve_metadata_full():
    config = Config(
        author="configuser",
        header="H",
        footer="F",
        extension="txt",
        rich=RichMetadata(extra_metadata=["tags", "status"]),
    )
    md = resolver.resolve_metadata("notes.md", config, author="cliuser", clock=_clock, username=_no_user)
    assert md.filestem == "notes"
    assert md.author == "cliuser"
    assert md.datetime == STAMP
    assert md.extension == "md"
    assert md.header == "H"
    assert md.footer == "F"
    assert md.extra_metadata == ("tags", "status")


def test_resolve_metadata_empty_config():
    md = resolver.resolve_metadata("report", Config(), clock=_clock, username=_user)
    assert md.filestem == "report"
    assert md.author == "osuser"
    assert md.extension is None
    assert md.header is None
    assert md.footer is None
    assert md.extra_metadata is None


def test_resolve_metadata_calls_clock_once():
    calls = []

    def clock():
        calls.append(1)
        return STAMP

    resolver.resolve_metadata("notes", Config(), clock=clock, username=_user)
    assert len(calls) == 1


def test_resolve_metadata_does_not_mutate_config():
    config = Config(author="alice", rich=RichMetadata(extra_metadata=["tags"]))
    snapshot = config.model_dump()
    resolver.resolve_metadata("notes", config, clock=_clock, username=_no_user)
    assert config.model_dump() == snapshot


@pytest.mark.parametrize("filename", [".txt", "   .md", " "])
def test_resolve_metadata_invalid_filename(filename):
    with pytest.raises(InvalidFilenameError):
        resolver.resolve_metadata(filename, Config(), clock=_clock, username=_user)


def test_local_now_has_offset():
    assert resolver.local_now().tzinfo is not None
