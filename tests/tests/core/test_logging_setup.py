#!/usr/bin/env python3
import logging
from pathlib import Path
import pytest

from mmom.core import logging_setup as ls


@pytest.fixture(autouse=True)
def _reset_mmom_logger():
    yield
    logger = logging.getLogger(ls.ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def _handlers(logger):
    console = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    files = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    return console, files


# --- log_file_path --- #

def test_log_file_path_default(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("MMOM_LOG_DIR", raising=False)
    assert ls.log_file_path(tmp_path) == tmp_path / "mmomlog.log"


def test_log_file_path_env_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MMOM_LOG_DIR", str(tmp_path / "logs"))
    assert ls.log_file_path(Path("/ignored")) == tmp_path / "logs" / "mmomlog.log"


# --- init_logging --- #

@pytest.mark.parametrize("verbose,level", [(False, logging.WARNING), (True, logging.INFO)])
def test_console_level_follows_verbose(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, verbose, level):
    monkeypatch.delenv("MMOM_LOG_DIR", raising=False)
    logger = ls.init_logging(tmp_path, verbose=verbose)
    console, files = _handlers(logger)
    assert [h.level for h in console] == [level]
    assert [h.level for h in files] == [logging.INFO]


def test_file_handler_appends_info(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("MMOM_LOG_DIR", raising=False)
    log_path = tmp_path / "mmomlog.log"
    log_path.write_text("previous run\n", encoding="utf-8")

    logger = ls.init_logging(tmp_path)
    logging.getLogger("mmom.core.test").info("hello from test")
    for h in logger.handlers:
        h.flush()

    text = log_path.read_text(encoding="utf-8")
    assert text.startswith("previous run\n")
    assert "[INFO] mmom.core.test: hello from test" in text


def test_init_logging_is_idempotent(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("MMOM_LOG_DIR", raising=False)
    ls.init_logging(tmp_path)
    logger = ls.init_logging(tmp_path, verbose=True)
    console, files = _handlers(logger)
    assert len(console) == 1
    assert len(files) == 1


def test_no_log_dir_means_console_only():
    logger = ls.init_logging(None)
    console, files = _handlers(logger)
    assert len(console) == 1
    assert files == []
