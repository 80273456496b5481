# src/task_tracker/tasks/task_query.py

from __future__ import annotations

"""
Read-only views over the task collection.

project_tasks() never touches its input: it filters into a new list and sorts
that list. Both sort passes rely on list.sort() being stable (reverse=True
keeps ties in input order too).
"""

from collections.abc import Callable, Iterable
from typing import Any

from .task_models import Priority, SortKey, SortOrder, StatusFilter, Task, TaskQuery

_SORT_KEYS: dict[SortKey, Callable[[Task], Any]] = {
    SortKey.CREATED_AT: lambda t: t.created_at,
    SortKey.UPDATED_AT: lambda t: t.updated_at,
    SortKey.TITLE: lambda t: t.title.casefold(),
    SortKey.PRIORITY: lambda t: Priority.rank(t.priority),
}


def matches_search(task: Task, search: str) -> bool:
    # Blank means "no search"; otherwise the term is matched as typed.
    if not search.strip():
        return True
    needle = search.casefold()
    return needle in task.title.casefold() or needle in (task.description or "").casefold()


def matches_status(task: Task, status: StatusFilter) -> bool:
    if status is StatusFilter.PENDING:
        return not task.completed
    if status is StatusFilter.COMPLETED:
        return task.completed
    return True


def project_tasks(tasks: Iterable[Task], query: TaskQuery | None = None) -> list[Task]:
    q = query or TaskQuery()

    result = [t for t in tasks if matches_search(t, q.search) and matches_status(t, q.status)]

    result.sort(key=_SORT_KEYS[q.sort_by], reverse=q.order is SortOrder.DESC)

    # Newest-first lists still show open work above finished work.
    if q.sort_by is SortKey.CREATED_AT:
        result.sort(key=lambda t: t.completed)

    return result
