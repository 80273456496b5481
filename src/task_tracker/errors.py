# src/task_tracker/errors.py

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class TaskTrackerError(Exception):
    """Base class for errors surfaced to the caller."""


class ValidationError(TaskTrackerError):
    """A draft was rejected before any mutation happened."""

    def __init__(self, errors: Mapping[str, Any]) -> None:
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid task fields: {fields}")


class TaskNotFoundError(TaskTrackerError):
    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class PersistenceError(TaskTrackerError):
    """
    The storage primitive refused a write.

    The repository has already rolled its in-memory state back when this is raised.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Failed to persist tasks ({operation})")
