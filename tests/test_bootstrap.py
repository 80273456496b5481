# tests/test_bootstrap.py

from __future__ import annotations

import logging
from dataclasses import replace

import pytest

from task_tracker.bootstrap import build_storage, create_initial_state, start_session
from task_tracker.config import Settings
from task_tracker.storage.memory_kv import MemoryKeyValueStorage
from task_tracker.storage.sqlite_kv import SqliteKeyValueStorage
from task_tracker.tasks import task_api


@pytest.fixture()
def env_settings(monkeypatch, tmp_path) -> Settings:
    monkeypatch.setenv("TASKTRACK_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("TASKTRACK_STORAGE_BACKEND", "SQLite")
    monkeypatch.setenv("TASKTRACK_STORAGE_KEY", "my-tasks")
    monkeypatch.setenv("TASKTRACK_STORAGE_QUOTA_BYTES", "not-a-number")
    monkeypatch.delenv("TASKTRACK_STORAGE_DB_PATH", raising=False)
    return Settings.from_env()


def test_settings_from_env(env_settings: Settings, tmp_path) -> None:
    assert env_settings.storage_backend == "sqlite"
    assert env_settings.storage_key == "my-tasks"
    assert env_settings.storage_db_path == tmp_path / "data" / "storage.sqlite3"
    assert env_settings.storage_quota_bytes is None


def test_unknown_backend_falls_back_to_sqlite(monkeypatch) -> None:
    monkeypatch.setenv("TASKTRACK_STORAGE_BACKEND", "redis")
    assert Settings.from_env().storage_backend == "sqlite"


def test_build_storage_backends(env_settings: Settings) -> None:
    assert isinstance(build_storage(env_settings), SqliteKeyValueStorage)
    assert env_settings.storage_db_path.exists()

    memory = replace(env_settings, storage_backend="memory", storage_quota_bytes=1024)
    assert isinstance(build_storage(memory), MemoryKeyValueStorage)


def test_state_reloads_from_sqlite(env_settings: Settings) -> None:
    first = create_initial_state(settings=env_settings)
    task = task_api.submit_task(first, title="Survives reload")

    second = create_initial_state(settings=env_settings)
    assert [t.id for t in task_api.list_tasks(second)] == [task.id]


def test_start_session_configures_logging(env_settings: Settings) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        state = start_session(settings=env_settings)
        assert len(state.repository) == 0
        assert (env_settings.log_dir / "task_tracker.log").exists()
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
        logging.captureWarnings(False)


def test_log_level_from_env(monkeypatch) -> None:
    monkeypatch.setenv("TASKTRACK_LOG_LEVEL", "debug")
    assert Settings.from_env().log_level == "DEBUG"

    monkeypatch.setenv("TASKTRACK_LOG_LEVEL", "VERBOSE")
    assert Settings.from_env().log_level == "INFO"


def test_console_filter_quiets_storage_and_third_party() -> None:
    from task_tracker.logging_setup import _ConsoleNoiseFilter

    def rec(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 0, "msg", None, None)

    f = _ConsoleNoiseFilter()
    assert f.filter(rec("task_tracker.tasks.task_repository", logging.DEBUG))
    assert not f.filter(rec("task_tracker.storage.sqlite_kv", logging.INFO))
    assert f.filter(rec("task_tracker.storage.sqlite_kv", logging.WARNING))
    assert not f.filter(rec("py.warnings", logging.WARNING))
    assert f.filter(rec("urllib3", logging.ERROR))
