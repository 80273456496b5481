# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..core.ports import Clock, KeyValueStorage
from ..core.runtime import SystemClock
from .task_models import Task
from .task_schema import dump_document, load_document

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "todo-app-tasks"


class TaskStore:
    """
    Persists the whole task collection under a single key.

    Faults never escape:
    - load() treats missing, unreadable or corrupt data as "no tasks"
    - save() / clear() report failure through their return value

    Every save overwrites the full document; the primitive's own set() is
    assumed atomic.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        clock: Clock | None = None,
    ) -> None:
        self._storage = storage
        self._key = key
        self._clock = clock or SystemClock()

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Task]:
        try:
            raw = self._storage.get(self._key)
        except Exception:
            logger.exception("Error retrieving tasks key=%s", self._key)
            return []

        if raw is None:
            return []

        try:
            tasks = load_document(raw, now=self._clock.now())
        except Exception:
            logger.exception("Stored tasks are corrupt key=%s; starting empty", self._key)
            return []

        logger.debug("Loaded tasks key=%s count=%s", self._key, len(tasks))
        return tasks

    def save(self, tasks: Sequence[Task]) -> bool:
        try:
            text = dump_document(tasks)
            self._storage.set(self._key, text)
        except Exception:
            logger.exception("Error saving tasks key=%s count=%s", self._key, len(tasks))
            return False
        logger.debug("Saved tasks key=%s count=%s bytes=%s", self._key, len(tasks), len(text))
        return True

    def clear(self) -> bool:
        try:
            self._storage.remove(self._key)
        except Exception:
            logger.exception("Error clearing tasks key=%s", self._key)
            return False
        logger.info("Cleared stored tasks key=%s", self._key)
        return True
