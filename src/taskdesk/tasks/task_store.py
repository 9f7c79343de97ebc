# src/taskdesk/tasks/task_store.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from pathlib import Path

from .task_codec import decode_task, encode_task, make_task_id, trim_text
from .task_errors import DirectoryListError, NotFoundError, StorageError, ValidationError
from .task_models import TASK_FILE_SUFFIX, DecodeMode, Task

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def ensure_storage_dir(tasks_dir: str | Path) -> Path:
    """
    Create the storage directory if it is missing (single level, not recursive).

    Errors are not caught: a directory we cannot create is fatal at startup.
    """
    path = Path(tasks_dir)
    if not path.is_dir():
        path.mkdir()
        logger.info("Created tasks directory %s", path)
    return path


class TaskStore:
    """
    Flat-file task store: one UTF-8 file `<id>.txt` per task.

    There is no index, cache or locking:
    - every call goes straight to the filesystem
    - concurrent writers to the same id are not serialized (last writer wins)
    - writes are not atomic; a failed write may leave a truncated file
    """

    def __init__(self, tasks_dir: str | Path, *, clock: Clock = time.time) -> None:
        self._tasks_dir = Path(tasks_dir)
        self._clock = clock
        logger.info("TaskStore ready dir=%s", self._tasks_dir)

    @property
    def tasks_dir(self) -> Path:
        return self._tasks_dir

    # ---- low-level helpers ----

    def _path_for(self, task_id: str) -> Path:
        return self._tasks_dir / Task.filename_for(task_id)

    @staticmethod
    def _read_raw(path: Path) -> str:
        # No newline translation; invalid bytes become U+FFFD.
        with open(path, encoding="utf-8", errors="replace", newline="") as f:
            return f.read()

    @staticmethod
    def _write_raw(path: Path, content: str) -> None:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)

    @staticmethod
    def _require_title(title: str | None) -> str:
        if not title or not trim_text(title):
            raise ValidationError("Title is required")
        return title

    def _iter_task_files(self) -> Iterator[Path]:
        try:
            entries = list(self._tasks_dir.iterdir())
        except OSError as exc:
            raise DirectoryListError(f"Cannot list tasks directory {self._tasks_dir}: {exc}") from exc
        for entry in entries:
            if entry.suffix == TASK_FILE_SUFFIX:
                yield entry

    # ---- public API ----

    def list_tasks(self) -> list[Task]:
        """
        Decode every `*.txt` file in directory enumeration order.

        Unreadable entries are skipped with a warning.
        A directory that cannot be listed yields [].
        """
        try:
            files = list(self._iter_task_files())
        except DirectoryListError:
            logger.exception("Error reading tasks directory %s", self._tasks_dir)
            return []

        tasks: list[Task] = []
        for path in files:
            try:
                raw = self._read_raw(path)
            except OSError as exc:
                logger.warning("Error reading task file %s: %s", path.name, exc)
                continue
            tasks.append(decode_task(raw, task_id=path.stem, mode=DecodeMode.DISPLAY))
        return tasks

    def add_task(self, *, title: str | None, description: str | None = None) -> str:
        title = self._require_title(title)
        task_id = make_task_id(title, self._clock())
        path = self._path_for(task_id)

        try:
            self._write_raw(path, encode_task(title, description))
        except OSError as exc:
            raise StorageError(f"Cannot write task file {path.name}: {exc}") from exc

        logger.info("Task created: %s", path.name)
        return task_id

    def get_task(self, task_id: str, *, mode: DecodeMode = DecodeMode.DISPLAY) -> Task:
        path = self._path_for(task_id)
        try:
            raw = self._read_raw(path)
        except OSError as exc:
            raise NotFoundError(task_id) from exc
        return decode_task(raw, task_id=task_id, mode=mode)

    def update_task(self, task_id: str, *, title: str | None, description: str | None = None) -> None:
        """
        Overwrite `<task_id>.txt`. The id never changes, even if the title does.

        No existence check: updating an unknown id creates the file.
        """
        title = self._require_title(title)
        path = self._path_for(task_id)

        try:
            self._write_raw(path, encode_task(title, description))
        except OSError as exc:
            raise StorageError(f"Cannot write task file {path.name}: {exc}") from exc

        logger.info("Task updated: %s", task_id)

    def delete_task(self, task_id: str) -> None:
        path = self._path_for(task_id)
        try:
            path.unlink()
        except FileNotFoundError as exc:
            raise NotFoundError(task_id) from exc
        except OSError as exc:
            raise StorageError(f"Cannot delete task file {path.name}: {exc}") from exc

        logger.info("Task deleted: %s", task_id)
