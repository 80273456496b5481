# tests/test_task_api.py

from __future__ import annotations

from task_tracker.core.state import AppState
from task_tracker.tasks import task_api
from task_tracker.tasks.task_models import StatusFilter, TaskQuery, TaskStats


def test_submit_valid_task_clears_banner(state: AppState) -> None:
    state.last_error = "old failure"
    task = task_api.submit_task(state, title="Write tests", priority="high")
    assert task is not None
    assert state.last_error is None
    assert state.form_errors == {}
    assert task_api.list_tasks(state) == [task]


def test_submit_short_title_reports_form_error_and_creates_nothing(state: AppState) -> None:
    assert task_api.submit_task(state, title="ab") is None
    assert "title" in state.form_errors
    assert "at least 3" in state.form_errors["title"]
    assert len(state.repository) == 0


def test_submit_persist_failure_sets_banner(state: AppState, storage) -> None:
    storage.fail_set = True
    assert task_api.submit_task(state, title="Never saved") is None
    assert state.last_error == "Failed to add task"
    assert len(state.repository) == 0


def test_edit_task_validates_changed_fields(state: AppState) -> None:
    task = task_api.submit_task(state, title="Original title")
    assert task_api.edit_task(state, task.id, title="no") is None
    assert "title" in state.form_errors
    assert state.repository.get(task.id).title == "Original title"

    edited = task_api.edit_task(state, task.id, title="Better title", description="more")
    assert edited.title == "Better title"
    assert edited.description == "more"
    assert state.form_errors == {}


def test_edit_missing_task(state: AppState) -> None:
    assert task_api.edit_task(state, "missing", title="Some title") is None
    assert state.last_error == "Task not found"


def test_toggle_and_remove(state: AppState) -> None:
    task = task_api.submit_task(state, title="Toggle me")
    assert task_api.toggle_task(state, task.id).completed is True
    assert task_api.remove_task(state, task.id) is True
    assert task_api.remove_task(state, task.id) is False
    assert state.last_error == "Task not found"
    assert task_api.toggle_task(state, task.id) is None


def test_toggle_persist_failure(state: AppState, storage) -> None:
    task = task_api.submit_task(state, title="Toggle me")
    storage.fail_set = True
    assert task_api.toggle_task(state, task.id) is None
    assert state.last_error == "Failed to toggle task completion"
    assert state.repository.get(task.id).completed is False


def test_clear_tasks_and_failure(state: AppState, storage) -> None:
    task_api.submit_task(state, title="First task")
    storage.fail_remove = True
    assert task_api.clear_tasks(state) is False
    assert state.last_error == "Failed to clear tasks"
    assert len(state.repository) == 1

    storage.fail_remove = False
    assert task_api.clear_tasks(state) is True
    assert state.last_error is None
    assert len(state.repository) == 0


def test_clear_completed_tasks(state: AppState) -> None:
    done = task_api.submit_task(state, title="Finished")
    task_api.submit_task(state, title="Still open")
    task_api.toggle_task(state, done.id)
    assert task_api.clear_completed_tasks(state) == 1
    assert [t.title for t in task_api.list_tasks(state)] == ["Still open"]


def test_stats_and_summary(state: AppState) -> None:
    a = task_api.submit_task(state, title="Task one")
    task_api.submit_task(state, title="Task two")
    task_api.submit_task(state, title="Something else")
    task_api.toggle_task(state, a.id)

    assert task_api.task_stats(state) == TaskStats(total=3, completed=1, pending=2, completion_rate=33)

    assert task_api.showing_summary(state, TaskQuery()) is None
    assert task_api.showing_summary(state, TaskQuery(search="task")) == "Showing 2 of 3 tasks"
    assert task_api.showing_summary(state, TaskQuery(search="nothing matches")) is None
    assert task_api.showing_summary(state, TaskQuery(status=StatusFilter.COMPLETED)) == "Showing 1 of 3 tasks"


def test_dismiss_error(state: AppState) -> None:
    state.last_error = "boom"
    task_api.dismiss_error(state)
    assert state.last_error is None
