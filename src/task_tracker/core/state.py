# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_repository import TaskRepository


@dataclass
class AppState:
    """
    Session state for one UI instance.

    The repository is the single writer of the task collection; everything the
    view needs besides tasks (banner text, form errors) lives here too.
    """

    settings: Any
    repository: TaskRepository

    # Transient, user-visible failure message ("error banner").
    last_error: str | None = None
    # field -> message for the task form, empty when the last submit was fine.
    form_errors: dict[str, str] = field(default_factory=dict)
