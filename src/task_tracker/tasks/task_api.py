# src/task_tracker/tasks/task_api.py

from __future__ import annotations

"""
UI-facing helpers.

Each helper runs one repository operation for the session in AppState and
turns failures into the banner text a view shows (state.last_error). Success
clears the banner. Nothing here raises for expected failures.
"""

import logging

from ..core.state import AppState
from ..errors import PersistenceError, ValidationError
from .task_models import Task, TaskDraft, TaskQuery, TaskStats
from .task_query import project_tasks
from .task_stats import compute_stats
from .task_validation import FieldError

logger = logging.getLogger(__name__)


def _ok(state: AppState) -> None:
    state.last_error = None
    state.form_errors = {}


def _fail(state: AppState, message: str) -> None:
    state.last_error = message


def _form_failed(state: AppState, errors: dict[str, FieldError]) -> None:
    state.form_errors = {name: err.message for name, err in errors.items()}


def submit_task(
    state: AppState,
    *,
    title: str,
    description: str = "",
    priority: str = "medium",
) -> Task | None:
    draft = TaskDraft(title=title, description=description, priority=priority)

    try:
        task = state.repository.add(draft)
    except ValidationError as e:
        _form_failed(state, e.errors)
        return None
    except PersistenceError:
        _fail(state, "Failed to add task")
        return None

    _ok(state)
    return task


def edit_task(
    state: AppState,
    task_id: str,
    *,
    title: str | None = None,
    description: str | None = None,
    priority: str | None = None,
) -> Task | None:
    fields: dict[str, object] = {}
    if title is not None:
        fields["title"] = title
    if description is not None:
        fields["description"] = description
    if priority is not None:
        fields["priority"] = priority

    try:
        task = state.repository.update(task_id, **fields)
    except ValidationError as e:
        _form_failed(state, e.errors)
        return None
    except PersistenceError:
        _fail(state, "Failed to update task")
        return None

    if task is None:
        _fail(state, "Task not found")
        return None

    _ok(state)
    return task


def toggle_task(state: AppState, task_id: str) -> Task | None:
    try:
        task = state.repository.toggle_completion(task_id)
    except PersistenceError:
        _fail(state, "Failed to toggle task completion")
        return None

    if task is None:
        _fail(state, "Task not found")
        return None

    _ok(state)
    return task


def remove_task(state: AppState, task_id: str) -> bool:
    try:
        removed = state.repository.delete(task_id)
    except PersistenceError:
        _fail(state, "Failed to delete task")
        return False

    if not removed:
        _fail(state, "Task not found")
        return False

    _ok(state)
    return True


def clear_tasks(state: AppState) -> bool:
    try:
        state.repository.clear_all()
    except PersistenceError:
        _fail(state, "Failed to clear tasks")
        return False

    _ok(state)
    logger.info("All tasks cleared")
    return True


def clear_completed_tasks(state: AppState) -> int:
    try:
        removed = state.repository.clear_completed()
    except PersistenceError:
        _fail(state, "Failed to clear completed tasks")
        return 0

    _ok(state)
    return removed


def list_tasks(state: AppState, query: TaskQuery | None = None) -> list[Task]:
    return project_tasks(state.repository.tasks, query)


def task_stats(state: AppState) -> TaskStats:
    return compute_stats(state.repository.tasks)


def showing_summary(state: AppState, query: TaskQuery) -> str | None:
    """'Showing 2 of 5 tasks' when the view is narrowed and not empty."""
    if not query.is_filtered:
        return None
    shown = len(list_tasks(state, query))
    if not shown:
        return None
    return f"Showing {shown} of {len(state.repository)} tasks"


def dismiss_error(state: AppState) -> None:
    state.last_error = None
