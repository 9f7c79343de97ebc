# src/taskdesk/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so handlers never re-read the environment.
    settings: object

    task_store: TaskRepo
