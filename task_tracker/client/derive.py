"""Derived projections over the client state

All functions here are pure and recomputed on every read.
"""
import math
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from task_tracker.models.task import Task

from .state import TaskFilter


def total_count(tasks: Sequence[Task]) -> int:
    return len(tasks)


def completed_count(tasks: Sequence[Task]) -> int:
    return sum(1 for task in tasks if task.completed)


def active_count(tasks: Sequence[Task]) -> int:
    return total_count(tasks) - completed_count(tasks)


def progress_percentage(tasks: Sequence[Task]) -> float:
    """Share of completed tasks in percent, 0 for an empty list"""
    total = total_count(tasks)
    if total == 0:
        return 0
    return completed_count(tasks) / total * 100


def all_completed(tasks: Sequence[Task]) -> bool:
    return len(tasks) > 0 and all(task.completed for task in tasks)


def matches_filter(task: Task, task_filter: TaskFilter) -> bool:
    if task_filter == TaskFilter.ACTIVE:
        return not task.completed
    if task_filter == TaskFilter.COMPLETED:
        return task.completed
    return True


def matches_search(task: Task, query: str) -> bool:
    return query.lower() in task.title.lower()


def filtered_tasks(tasks: Sequence[Task], task_filter: TaskFilter, query: str = "") -> List[Task]:
    """Tasks passing both the status filter and the case-insensitive title search"""
    return [
        task for task in tasks
        if matches_filter(task, task_filter) and matches_search(task, query)
    ]


def relative_age(timestamp: Optional[datetime], now: Optional[datetime] = None) -> str:
    """
    Bucket elapsed time into a short label.

    Args:
        timestamp: When the thing happened (naive values are treated as UTC)
        now: Reference time (defaults to the current UTC time)

    Returns:
        "just now", "Nm ago", "Nh ago" or "Nd ago"; empty string without a timestamp
    """
    if timestamp is None:
        return ""

    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = math.floor((now - timestamp).total_seconds())

    if seconds < 60:
        return "just now"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    if seconds < 86400:
        return f"{seconds // 3600}h ago"
    return f"{seconds // 86400}d ago"
