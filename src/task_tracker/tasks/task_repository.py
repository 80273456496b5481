# src/task_tracker/tasks/task_repository.py

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime

from ..core.ports import Clock, IdGenerator
from ..core.runtime import SystemClock, TimestampIdGenerator
from ..errors import PersistenceError, TaskNotFoundError, ValidationError
from .task_models import Priority, Task, TaskDraft
from .task_store import TaskStore
from .task_validation import validate_draft, validate_fields

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"title", "description", "priority", "completed"})

# Guard against an id source that keeps handing out taken ids.
_MAX_ID_ATTEMPTS = 1000


class TaskRepository:
    """
    Owns the canonical in-memory task collection.

    Every mutation builds the next collection, saves it, and only then swaps it
    in. A failed save therefore leaves memory equal to the last successful
    save and raises PersistenceError.

    Task instances are never modified after they are handed out; edits produce
    new instances.

    add() validates the whole draft, update() only the fields it touches; a
    rejected edit raises ValidationError before anything changes.
    """

    def __init__(
        self,
        store: TaskStore,
        *,
        clock: Clock | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._store = store
        self._clock = clock or SystemClock()
        self._ids = id_generator or TimestampIdGenerator()
        self._tasks: list[Task] = []

    # ---- reads ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def require(self, task_id: str) -> Task:
        task = self.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def load(self) -> int:
        """Replace in-memory state with what the store holds."""
        seen: set[str] = set()
        loaded: list[Task] = []
        for t in self._store.load():
            if t.id in seen:
                logger.warning("Dropping duplicate task id=%s from stored document", t.id)
                continue
            seen.add(t.id)
            loaded.append(t)
        self._tasks = loaded
        logger.info("TaskRepository loaded count=%s", len(loaded))
        return len(loaded)

    # ---- low-level helpers ----

    def _index_of(self, task_id: str) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def _now(self) -> datetime:
        return self._clock.now()

    def _touch(self, task: Task, **changes: object) -> Task:
        # updated_at never precedes created_at, even if the clock stepped back.
        now = max(self._now(), task.created_at)
        return replace(task, **changes, updated_at=now)

    def _allocate_id(self) -> str:
        taken = {t.id for t in self._tasks}
        for _ in range(_MAX_ID_ATTEMPTS):
            candidate = self._ids.new_id()
            if candidate not in taken:
                return candidate
            logger.warning("Id generator returned taken id=%s; retrying", candidate)
        raise RuntimeError("Id generator failed to produce a unique task id")

    def _commit(self, next_tasks: list[Task], operation: str) -> None:
        if not self._store.save(next_tasks):
            logger.error("Persist failed op=%s; in-memory state unchanged", operation)
            raise PersistenceError(operation)
        self._tasks = next_tasks

    # ---- mutations ----

    def add(self, draft: TaskDraft) -> Task:
        errors = validate_draft(draft)
        if errors:
            raise ValidationError(errors)

        clean = draft.normalized()
        now = self._now()
        task = Task(
            id=self._allocate_id(),
            title=clean.title,
            description=clean.description,
            priority=Priority.from_raw(clean.priority) or Priority.MEDIUM,
            completed=False,
            created_at=now,
            updated_at=now,
        )
        self._commit([*self._tasks, task], "add")
        logger.debug("Task added id=%s priority=%s", task.id, task.priority)
        return task

    def update(self, task_id: str, **fields: object) -> Task | None:
        unknown = set(fields) - EDITABLE_FIELDS
        if unknown:
            raise TypeError(f"Not editable: {', '.join(sorted(unknown))}")

        title = fields.get("title")
        description = fields.get("description")
        priority = fields.get("priority")

        errors = validate_fields(
            title=None if title is None else str(title),
            description=None if description is None else str(description),
            priority=None if priority is None else str(priority),
        )
        if errors:
            raise ValidationError(errors)

        idx = self._index_of(task_id)
        if idx is None:
            logger.warning("Task with id %s not found (update)", task_id)
            return None

        changes: dict[str, object] = {}
        if title is not None:
            changes["title"] = str(title).strip()
        if description is not None:
            changes["description"] = str(description).strip()
        if priority is not None:
            changes["priority"] = Priority.from_raw(str(priority)) or Priority.MEDIUM
        if "completed" in fields:
            changes["completed"] = bool(fields["completed"])

        updated = self._touch(self._tasks[idx], **changes)
        next_tasks = list(self._tasks)
        next_tasks[idx] = updated
        self._commit(next_tasks, "update")
        logger.debug("Task updated id=%s fields=%s", task_id, sorted(changes))
        return updated

    def toggle_completion(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.warning("Task with id %s not found (toggle)", task_id)
            return None

        current = self._tasks[idx]
        toggled = self._touch(current, completed=not current.completed)
        next_tasks = list(self._tasks)
        next_tasks[idx] = toggled
        self._commit(next_tasks, "toggle")
        return toggled

    def delete(self, task_id: str) -> bool:
        next_tasks = [t for t in self._tasks if t.id != task_id]
        if len(next_tasks) == len(self._tasks):
            logger.warning("Task with id %s not found (delete)", task_id)
            return False
        self._commit(next_tasks, "delete")
        logger.debug("Task deleted id=%s", task_id)
        return True

    def clear_completed(self) -> int:
        next_tasks = [t for t in self._tasks if not t.completed]
        removed = len(self._tasks) - len(next_tasks)
        if removed:
            self._commit(next_tasks, "clear_completed")
            logger.info("Cleared completed tasks count=%s", removed)
        return removed

    def clear_all(self) -> bool:
        if not self._store.clear():
            logger.error("Persist failed op=clear_all; in-memory state unchanged")
            raise PersistenceError("clear_all")
        self._tasks = []
        return True
