from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from tasks_api.infrastructure.models import SEED_TASKS, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store keyed by task id.

    Every read and write goes through a single lock, so concurrent
    requests never observe a half-applied put/delete.
    """

    def __init__(self, tasks: Iterable[Task] = SEED_TASKS) -> None:
        self._lock = threading.Lock()
        self._tasks: dict[str, Task] = {t.id: t.model_copy(deep=True) for t in tasks}
        logger.info("TaskStore ready total=%s", len(self._tasks))

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def get_all(self) -> dict[str, Task]:
        """Return a snapshot of every stored task. Order is not guaranteed."""
        with self._lock:
            return dict(self._tasks)

    def get(self, task_id: str) -> Task | None:
        with self._lock:
            return self._tasks.get(task_id)

    def put(self, task: Task) -> None:
        """Insert or replace the task stored under ``task.id``."""
        with self._lock:
            self._tasks[task.id] = task

    def delete(self, task_id: str) -> None:
        # Missing ids are not an error.
        with self._lock:
            self._tasks.pop(task_id, None)
