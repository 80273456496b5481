# src/task_tracker/bootstrap.py

"""
Composition root:
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the storage primitive, store adapter and repository into AppState,
- loads the persisted collection.
"""

from __future__ import annotations

import logging

from .config import get_settings
from .core.ports import Clock, IdGenerator, KeyValueStorage
from .core.runtime import SystemClock, TimestampIdGenerator
from .core.state import AppState
from .logging_setup import setup_logging
from .storage.memory_kv import MemoryKeyValueStorage
from .storage.sqlite_kv import SqliteKeyValueStorage
from .tasks.task_repository import TaskRepository
from .tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_db_path.parent.mkdir(parents=True, exist_ok=True)


def build_storage(settings) -> KeyValueStorage:
    backend = getattr(settings, "storage_backend", "sqlite")
    if backend == "memory":
        return MemoryKeyValueStorage(quota_bytes=getattr(settings, "storage_quota_bytes", None))
    if backend == "sqlite":
        _ensure_local_dirs(settings)
        return SqliteKeyValueStorage(settings.storage_db_path)
    raise ValueError(f"Unknown storage backend: {backend!r}")


def create_initial_state(
    *,
    settings=None,
    storage: KeyValueStorage | None = None,
    clock: Clock | None = None,
    id_generator: IdGenerator | None = None,
) -> AppState:
    """
    Create AppState and load persisted tasks.

    Everything is injectable so tests never read the real environment or disk.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    clock = clock or SystemClock()
    if storage is None:
        storage = build_storage(settings)

    store = TaskStore(storage, key=settings.storage_key, clock=clock)
    repository = TaskRepository(
        store,
        clock=clock,
        id_generator=id_generator or TimestampIdGenerator(),
    )
    count = repository.load()

    logger.info(
        "State ready app=%s backend=%s key=%s tasks=%s",
        getattr(settings, "app_name", "task-tracker"),
        getattr(settings, "storage_backend", "?"),
        settings.storage_key,
        count,
    )
    return AppState(settings=settings, repository=repository)


def start_session(*, settings=None) -> AppState:
    """Configure logging from settings, then build the state. Call once per process."""
    if settings is None:
        settings = get_settings()
    setup_logging(log_dir=settings.log_dir, console_level=settings.log_level)
    return create_initial_state(settings=settings)
