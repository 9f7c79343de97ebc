# tests/test_bootstrap.py

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from taskdesk.cli.bootstrap import create_initial_state
from taskdesk.logging_setup import _ConsoleNoiseFilter, setup_logging
from taskdesk.tasks.task_store import TaskStore


def test_create_initial_state_creates_storage_dir(settings: SimpleNamespace) -> None:
    assert not settings.tasks_dir.exists()

    state = create_initial_state(settings=settings)

    assert settings.tasks_dir.is_dir()
    assert state.settings is settings
    assert isinstance(state.task_store, TaskStore)
    assert state.task_store.tasks_dir == settings.tasks_dir
    assert state.task_store.list_tasks() == []


def test_create_initial_state_keeps_existing_tasks(settings: SimpleNamespace) -> None:
    settings.tasks_dir.mkdir()
    (settings.tasks_dir / "1_old.txt").write_text("Old\nstill here", encoding="utf-8")

    state = create_initial_state(settings=settings)

    [task] = state.task_store.list_tasks()
    assert task.title == "Old"


def test_create_initial_state_fails_when_storage_dir_cannot_be_created(
    settings: SimpleNamespace,
) -> None:
    settings.tasks_dir = settings.tasks_dir / "nested" / "deeper"

    with pytest.raises(OSError):
        create_initial_state(settings=settings)


def test_setup_logging_writes_file(settings: SimpleNamespace) -> None:
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        log_file = setup_logging(log_dir=settings.log_dir)
        logging.getLogger("taskdesk.test").info("hello from test")
        for h in root.handlers:
            h.flush()

        assert log_file == settings.log_dir / "taskdesk.log"
        assert "hello from test" in log_file.read_text(encoding="utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
        logging.captureWarnings(False)


def test_console_filter_keeps_app_logs_and_quiets_werkzeug() -> None:
    f = _ConsoleNoiseFilter()

    def rec(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert f.filter(rec("taskdesk.web.routes", logging.DEBUG))
    assert not f.filter(rec("werkzeug", logging.INFO))
    assert f.filter(rec("werkzeug", logging.WARNING))
    assert not f.filter(rec("urllib3", logging.WARNING))
    assert f.filter(rec("urllib3", logging.ERROR))
