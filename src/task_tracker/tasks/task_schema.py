# src/task_tracker/tasks/task_schema.py

"""
Versioned document format for the persisted task collection.

Stored text is JSON:

    {"version": 1, "tasks": [{"id": ..., "title": ..., "description": ...,
      "priority": ..., "completed": ..., "createdAt": ..., "updatedAt": ...}]}

Compatibility rules:
- a bare JSON list is the legacy unversioned layout (version 0)
- a newer version is read best-effort; unknown keys are ignored
- per record, only "id" and "title" are required; the rest default
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

from .task_models import Priority, Task

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1
LEGACY_VERSION = 0


class SchemaError(ValueError):
    """The stored document does not have the expected top-level structure."""


def _ts_to_str(ts: datetime) -> str:
    return ts.astimezone(UTC).isoformat().replace("+00:00", "Z")


def _str_to_ts(raw: Any) -> datetime | None:
    if not isinstance(raw, str) or not raw.strip():
        return None
    try:
        ts = datetime.fromisoformat(raw.strip())
    except ValueError:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=UTC)
    return ts


def task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "priority": str(task.priority),
        "completed": bool(task.completed),
        "createdAt": _ts_to_str(task.created_at),
        "updatedAt": _ts_to_str(task.updated_at),
    }


def record_to_task(raw: Any, *, fallback_ts: datetime) -> Task | None:
    """Build a Task from one stored record; None if the record is unusable."""
    if not isinstance(raw, dict):
        return None

    raw_id = raw.get("id")
    title = raw.get("title")
    # Numeric ids come from the oldest documents (Date.now() without toString()).
    if isinstance(raw_id, bool) or not isinstance(raw_id, (str, int)) or raw_id == "":
        return None
    if not isinstance(title, str):
        return None

    created = _str_to_ts(raw.get("createdAt"))
    updated = _str_to_ts(raw.get("updatedAt"))
    created = created or updated or fallback_ts
    updated = updated or created
    if updated < created:
        updated = created

    priority = raw.get("priority")
    description = raw.get("description")

    return Task(
        id=str(raw_id),
        title=title,
        description=description if isinstance(description, str) else "",
        priority=priority if isinstance(priority, str) and priority else Priority.MEDIUM.value,
        # Only a JSON true marks a task completed.
        completed=raw.get("completed") is True,
        created_at=created,
        updated_at=updated,
    )


def dump_document(tasks: Iterable[Task]) -> str:
    doc = {
        "version": SCHEMA_VERSION,
        "tasks": [task_to_record(t) for t in tasks],
    }
    return json.dumps(doc, ensure_ascii=False)


def load_document(text: str, *, now: datetime) -> list[Task]:
    """
    Parse stored text into tasks.

    Raises SchemaError / json.JSONDecodeError when the document as a whole is
    unusable; individual bad records are skipped and logged.
    """
    data = json.loads(text)

    if isinstance(data, list):
        version = LEGACY_VERSION
        records = data
    elif isinstance(data, dict):
        version = data.get("version")
        records = data.get("tasks")
        if not isinstance(version, int) or isinstance(version, bool):
            raise SchemaError(f"document version must be an integer, got {version!r}")
        if not isinstance(records, list):
            raise SchemaError("document has no 'tasks' list")
    else:
        raise SchemaError(f"unexpected document type {type(data).__name__}")

    if version > SCHEMA_VERSION:
        logger.warning(
            "Task document version=%s is newer than supported=%s; reading known fields only",
            version,
            SCHEMA_VERSION,
        )

    out: list[Task] = []
    for idx, raw in enumerate(records):
        task = record_to_task(raw, fallback_ts=now)
        if task is None:
            logger.warning("Skipping malformed task record index=%s", idx)
            continue
        out.append(task)
    return out
