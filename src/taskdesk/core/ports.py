# src/taskdesk/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the web layer.

Handlers depend on this Protocol instead of the concrete flat-file store,
which keeps tests free to swap in fakes (e.g. a store whose writes fail).
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import DecodeMode, Task


class TaskRepo(Protocol):
    def list_tasks(self) -> list[Task]: ...

    def add_task(self, *, title: str | None, description: str | None = None) -> str: ...

    def get_task(self, task_id: str, *, mode: DecodeMode = ...) -> Task: ...

    def update_task(
            self,
            task_id: str,
            *,
            title: str | None,
            description: str | None = None,
    ) -> None: ...

    def delete_task(self, task_id: str) -> None: ...
