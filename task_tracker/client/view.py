"""View model built from the client state for rendering"""
import math
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel

from task_tracker.models.task import Priority

from . import derive
from .state import ClientState, TaskFilter

PRIORITY_BADGES = {
    Priority.HIGH: "🔴",
    Priority.MEDIUM: "🟡",
    Priority.LOW: "🟢",
}

EMPTY_MESSAGES = {
    TaskFilter.ALL: "No tasks yet. Add one above!",
    TaskFilter.ACTIVE: "No active tasks. Great job! 🎉",
    TaskFilter.COMPLETED: "No completed tasks yet.",
}


class TaskRow(BaseModel):
    id: str
    title: str
    completed: bool
    priority: Priority
    badge: str
    age: str
    editing: bool = False
    can_edit: bool = True


class TaskStats(BaseModel):
    total: int
    active: int
    completed: int


class TaskListView(BaseModel):
    """Everything a UI needs to draw the task list"""
    stats: TaskStats
    progress_percentage: float
    progress_label: str
    rows: List[TaskRow]
    empty_message: Optional[str] = None
    toast: Optional[str] = None
    undo_available: bool = False
    celebrating: bool = False
    loading: bool = False


def empty_message(task_filter: TaskFilter, query: str) -> str:
    if query:
        return f'No tasks matching "{query}"'
    return EMPTY_MESSAGES[task_filter]


def progress_label(percentage: float) -> str:
    # Half-up rounding, as shown in the progress bar
    return f"{math.floor(percentage + 0.5)}% Complete"


def build_view(state: ClientState, now: Optional[datetime] = None) -> TaskListView:
    tasks = state.tasks
    editing_id = state.editing.task_id if state.editing else None
    percentage = derive.progress_percentage(tasks)

    rows = [
        TaskRow(
            id=task.id,
            title=task.title,
            completed=task.completed,
            priority=task.priority,
            badge=PRIORITY_BADGES[task.priority],
            age=derive.relative_age(task.created_at, now),
            editing=task.id == editing_id,
            can_edit=not task.completed and task.id != editing_id,
        )
        for task in derive.filtered_tasks(tasks, state.filter, state.search_query)
    ]

    return TaskListView(
        stats=TaskStats(
            total=derive.total_count(tasks),
            active=derive.active_count(tasks),
            completed=derive.completed_count(tasks),
        ),
        progress_percentage=percentage,
        progress_label=progress_label(percentage),
        rows=rows,
        empty_message=None if rows else empty_message(state.filter, state.search_query),
        toast=state.toast,
        undo_available=state.deleted_task is not None,
        celebrating=state.celebrating,
        loading=state.loading,
    )
