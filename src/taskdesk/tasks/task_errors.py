# src/taskdesk/tasks/task_errors.py

"""
Failures raised by the task repository.

Handlers catch these at the request boundary and turn them into redirects
with a flash message; none of them should reach the client as a 5xx.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class for every task repository failure."""


class ValidationError(TaskError, ValueError):
    """Submitted data is unusable (empty or whitespace-only title)."""


class NotFoundError(TaskError, LookupError):
    """No readable file exists for the requested task id."""

    def __init__(self, task_id: str, message: str | None = None) -> None:
        super().__init__(message or f"Task not found: {task_id}")
        self.task_id = task_id


class StorageError(TaskError, OSError):
    """A write, delete or mkdir on the storage directory failed."""


class DirectoryListError(StorageError):
    """The storage directory could not be enumerated."""
