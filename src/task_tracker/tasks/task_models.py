# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_raw(cls, raw: str | None) -> Priority | None:
        if not raw:
            return cls.MEDIUM
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return None

    @staticmethod
    def rank(raw: str | None) -> int:
        """Sort weight: high=3, medium=2, low=1, anything else 0."""
        return _PRIORITY_RANK.get(raw or "", 0)


_PRIORITY_RANK = {
    Priority.HIGH.value: 3,
    Priority.MEDIUM.value: 2,
    Priority.LOW.value: 1,
}


class StatusFilter(StrEnum):
    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def _missing_(cls, value: object) -> StatusFilter | None:
        # "active" is the name the simpler list view used for pending tasks.
        if isinstance(value, str) and value.strip().lower() == "active":
            return cls.PENDING
        return None


class SortKey(StrEnum):
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    TITLE = "title"
    PRIORITY = "priority"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


@dataclass(slots=True)
class Task:
    id: str
    title: str
    description: str
    priority: str
    completed: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, slots=True)
class TaskDraft:
    """User input for a new task, not yet validated."""

    title: str
    description: str = ""
    priority: str = Priority.MEDIUM

    def normalized(self) -> TaskDraft:
        return TaskDraft(
            title=(self.title or "").strip(),
            description=(self.description or "").strip(),
            priority=(self.priority or Priority.MEDIUM).strip().lower(),
        )


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int
    pending: int
    completion_rate: int


@dataclass(frozen=True, slots=True)
class TaskQuery:
    search: str = ""
    status: StatusFilter = StatusFilter.ALL
    sort_by: SortKey = SortKey.CREATED_AT
    order: SortOrder = SortOrder.DESC

    def __post_init__(self) -> None:
        # Views hand over plain strings ("pending", "title", "asc").
        object.__setattr__(self, "search", self.search or "")
        object.__setattr__(self, "status", StatusFilter(self.status))
        object.__setattr__(self, "sort_by", SortKey(self.sort_by))
        object.__setattr__(self, "order", SortOrder(self.order))

    @property
    def is_filtered(self) -> bool:
        return bool(self.search.strip()) or self.status is not StatusFilter.ALL
