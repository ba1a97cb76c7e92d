#!/usr/bin/env python3
from pathlib import Path
import pytest

from mmom.core.errors import DocumentExistsError, FileWriteError
from mmom.core.writer import write_document


# --- Exclusive create --- #

def test_creates_new_file(tmp_path: Path):
    path = tmp_path / "notes.md"
    write_document(path, b"hello")
    assert path.read_bytes() == b"hello"


def test_existing_file_without_overwrite_fails_and_is_untouched(tmp_path: Path):
    path = tmp_path / "notes.md"
    path.write_bytes(b"original")
    with pytest.raises(DocumentExistsError, match="Use -o to overwrite"):
        write_document(path, b"new")
    assert path.read_bytes() == b"original"


def test_document_exists_error_is_a_file_exists_error(tmp_path: Path):
    path = tmp_path / "notes.md"
    path.write_bytes(b"original")
    with pytest.raises(FileExistsError):
        write_document(path, b"new", overwrite=False)


# --- Truncating create --- #

def test_overwrite_truncates_existing(tmp_path: Path):
    path = tmp_path / "notes.md"
    path.write_bytes(b"a much longer original body")
    write_document(path, b"short", overwrite=True)
    assert path.read_bytes() == b"short"


def test_overwrite_creates_when_absent(tmp_path: Path):
    path = tmp_path / "notes.md"
    write_document(path, b"x", overwrite=True)
    assert path.read_bytes() == b"x"


# --- Failures --- #

@pytest.mark.parametrize("overwrite", [True, False])
def test_missing_directory_raises_file_write_error(tmp_path: Path, overwrite):
    path = tmp_path / "no" / "such" / "dir" / "notes.md"
    with pytest.raises(FileWriteError, match="Error writing"):
        write_document(path, b"x", overwrite=overwrite)


def test_directory_target_with_overwrite_raises_file_write_error(tmp_path: Path):
    target = tmp_path / "adir"
    target.mkdir()
    with pytest.raises(FileWriteError):
        write_document(target, b"x", overwrite=True)
