# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from logging_setup import setup_logging
from todo_list import TodoList


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    # drop only what setup_logging installed; pytest manages its own capture handlers
    for h in list(root.handlers):
        if type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


def test_store_mutations_are_logged_to_file(tmp_path: Path, restore_root_logger) -> None:
    log_file = tmp_path / "logs" / "todo.log"
    setup_logging(log_file=log_file)

    TodoList().add_task("Buy milk")
    for h in logging.getLogger().handlers:
        h.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "todo_list: added task #1 'Buy milk'" in content


def test_level_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, restore_root_logger) -> None:
    log_file = tmp_path / "todo.log"
    monkeypatch.setenv("TODO_LOG_FILE", str(log_file))
    monkeypatch.setenv("TODO_LOG_LEVEL", "warning")
    setup_logging()

    TodoList().add_task("quiet")
    for h in logging.getLogger().handlers:
        h.flush()

    assert log_file.read_text(encoding="utf-8") == ""


def test_without_log_file_only_console_handler(monkeypatch: pytest.MonkeyPatch, restore_root_logger) -> None:
    monkeypatch.delenv("TODO_LOG_FILE", raising=False)
    setup_logging()

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert handlers[0].level == logging.WARNING
