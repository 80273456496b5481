# src/task_tracker/tasks/task_stats.py

from __future__ import annotations

from collections.abc import Iterable

from .task_models import Task, TaskStats


def _percent_half_up(part: int, whole: int) -> int:
    # Integer form of floor(100 * part / whole + 0.5); avoids banker's rounding.
    return (200 * part + whole) // (2 * whole)


def compute_stats(tasks: Iterable[Task]) -> TaskStats:
    total = 0
    completed = 0
    for t in tasks:
        total += 1
        if t.completed:
            completed += 1

    rate = _percent_half_up(completed, total) if total else 0
    return TaskStats(
        total=total,
        completed=completed,
        pending=total - completed,
        completion_rate=rate,
    )
