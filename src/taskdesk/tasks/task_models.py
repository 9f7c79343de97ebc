# src/taskdesk/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

TASK_FILE_SUFFIX = ".txt"

UNTITLED_TASK = "Untitled Task"
NO_DESCRIPTION = "No description available"


class DecodeMode(StrEnum):
    """
    Which view a task is decoded for.

    Notes:
    - DISPLAY (list/detail) shows a placeholder for a missing description.
    - EDIT leaves a missing description empty so the form is not pre-filled
      with placeholder text.
    """

    DISPLAY = "display"
    EDIT = "edit"

    def description_default(self) -> str:
        return NO_DESCRIPTION if self is DecodeMode.DISPLAY else ""


@dataclass(slots=True)
class Task:
    id: str
    title: str
    description: str
    filename: str | None = None

    @staticmethod
    def filename_for(task_id: str) -> str:
        return f"{task_id}{TASK_FILE_SUFFIX}"
