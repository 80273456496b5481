# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.bootstrap import create_initial_state
from task_tracker.core.state import AppState
from task_tracker.tasks.task_repository import TaskRepository
from task_tracker.tasks.task_store import TaskStore

from .fakes import FakeClock, FlakyStorage, SequentialIdGenerator


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="task-tracker-test",
        data_dir=tmp_path,
        storage_backend="memory",
        storage_db_path=tmp_path / "storage.sqlite3",
        storage_key="todo-app-tasks",
        storage_quota_bytes=None,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def storage() -> FlakyStorage:
    return FlakyStorage()


@pytest.fixture()
def store(storage: FlakyStorage, clock: FakeClock) -> TaskStore:
    return TaskStore(storage, key="todo-app-tasks", clock=clock)


@pytest.fixture()
def repo(store: TaskStore, clock: FakeClock) -> TaskRepository:
    return TaskRepository(store, clock=clock, id_generator=SequentialIdGenerator())


@pytest.fixture()
def state(settings: SimpleNamespace, storage: FlakyStorage, clock: FakeClock) -> AppState:
    """
    AppState wired with deterministic fakes.

    Storage stays a real in-memory key-value primitive so the store adapter
    and codec are exercised end to end.
    """
    return create_initial_state(
        settings=settings,
        storage=storage,
        clock=clock,
        id_generator=SequentialIdGenerator(),
    )
