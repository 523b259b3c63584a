from __future__ import annotations

import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from combsort.logging_setup import configure_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    configure_logging("INFO")


def _kinds(logger: logging.Logger):
    console = [h for h in logger.handlers if isinstance(h, RichHandler)]
    files = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    return console, files


def test_console_only_by_default() -> None:
    logger = configure_logging("WARNING")
    console, files = _kinds(logger)
    assert logger.name == "combsort"
    assert logger.level == logging.WARNING
    assert len(console) == 1 and files == []
    assert logging.getLogger("werkzeug").level == logging.WARNING


def test_file_handler_writes_formatted_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "server.log"
    configure_logging("DEBUG", str(log_file))

    logging.getLogger("combsort.api.app").info("Sorting completed successfully")
    for h in logging.getLogger("combsort").handlers:
        h.flush()

    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    assert line.startswith("[")
    assert "] INFO     combsort.api.app: Sorting completed successfully" in line


def test_repeat_call_replaces_handlers(tmp_path: Path) -> None:
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"
    configure_logging("INFO", str(first))
    logger = configure_logging("INFO", str(second))

    console, files = _kinds(logger)
    assert len(console) == 1
    assert len(files) == 1
    assert Path(files[0].baseFilename).name == "second.log"
