import logging
from pathlib import Path

from rich.logging import RichHandler

from todocli.utils.config import get_log_level, get_tasks_file
from todocli.utils.logger import configure_logging


def test_tasks_file_default(monkeypatch):
    monkeypatch.delenv("TODOCLI_TASKS_FILE", raising=False)
    assert get_tasks_file() == Path("tasks.json")


def test_tasks_file_override(monkeypatch, tmp_path):
    monkeypatch.setenv("TODOCLI_TASKS_FILE", str(tmp_path / "todo.json"))
    assert get_tasks_file() == tmp_path / "todo.json"


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("TODOCLI_TASKS_FILE", "  ")
    monkeypatch.setenv("TODOCLI_LOG_LEVEL", "")
    assert get_tasks_file() == Path("tasks.json")
    assert get_log_level() == "WARNING"


def test_log_level_is_normalised(monkeypatch):
    monkeypatch.setenv("TODOCLI_LOG_LEVEL", " debug ")
    assert get_log_level() == "DEBUG"


def test_configure_logging_is_idempotent():
    root = logging.getLogger()
    configure_logging("INFO")
    configure_logging("DEBUG")
    handlers = [h for h in root.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert root.level == logging.DEBUG
    configure_logging("not-a-level")
    assert root.level == logging.WARNING
