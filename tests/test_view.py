from __future__ import annotations

from datetime import datetime, timedelta, timezone

from task_tracker.client.state import ClientState, EditBuffer, TaskFilter
from task_tracker.client.view import build_view
from task_tracker.models.task import Priority, Task

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _state(**kwargs) -> ClientState:
    tasks = [
        Task(id="a", title="Buy Milk", priority=Priority.HIGH, created_at=NOW - timedelta(hours=2)),
        Task(id="b", title="Walk dog", completed=True, priority=Priority.LOW, created_at=NOW),
        Task(id="c", title="Call mom", created_at=NOW - timedelta(days=3)),
    ]
    return ClientState(tasks=tasks, **kwargs)


def test_stats_and_progress_label() -> None:
    view = build_view(_state(), now=NOW)

    assert (view.stats.total, view.stats.active, view.stats.completed) == (3, 2, 1)
    assert view.progress_label == "33% Complete"
    assert view.empty_message is None


def test_progress_label_rounds_half_up() -> None:
    state = ClientState(tasks=[
        Task(id="a", title="a", completed=True, created_at=NOW),
        Task(id="b", title="b", created_at=NOW),
    ])

    assert build_view(state, now=NOW).progress_label == "50% Complete"
    assert build_view(ClientState(), now=NOW).progress_label == "0% Complete"


def test_rows_carry_badges_ages_and_edit_flags() -> None:
    view = build_view(_state(editing=EditBuffer(task_id="c", draft="Call dad")), now=NOW)
    rows = {row.id: row for row in view.rows}

    assert rows["a"].badge == "🔴"
    assert rows["a"].age == "2h ago"
    assert rows["a"].can_edit is True

    assert rows["b"].badge == "🟢"
    assert rows["b"].age == "just now"
    assert rows["b"].can_edit is False

    assert rows["c"].badge == "🟡"
    assert rows["c"].age == "3d ago"
    assert rows["c"].editing is True
    assert rows["c"].can_edit is False


def test_empty_messages() -> None:
    assert build_view(ClientState(), now=NOW).empty_message == "No tasks yet. Add one above!"

    only_done = ClientState(
        tasks=[Task(id="x", title="done", completed=True, created_at=NOW)],
        filter=TaskFilter.ACTIVE,
    )
    assert build_view(only_done, now=NOW).empty_message == "No active tasks. Great job! 🎉"

    only_open = ClientState(
        tasks=[Task(id="y", title="open", created_at=NOW)],
        filter=TaskFilter.COMPLETED,
    )
    assert build_view(only_open, now=NOW).empty_message == "No completed tasks yet."

    searched = _state(search_query="cheese")
    assert build_view(searched, now=NOW).empty_message == 'No tasks matching "cheese"'
