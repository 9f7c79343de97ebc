# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from flask import Flask
from flask.testing import FlaskClient

from taskdesk.core.state import AppState
from taskdesk.tasks.task_store import TaskStore, ensure_storage_dir
from taskdesk.web.app import create_app


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the web app.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the process environment.
    """
    return SimpleNamespace(
        app_name="taskdesk-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        host="127.0.0.1",
        port=3000,
        debug=False,
        tasks_dir=tmp_path / "tasks",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(ensure_storage_dir(settings.tasks_dir))


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState wired with the real flat-file store in a tmp directory."""
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def app(state: AppState) -> Flask:
    app = create_app(state)
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()
