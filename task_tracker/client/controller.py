"""
Client State Controller

Owns the session's ClientState, turns user intents into API calls and
refetches the full task list after every mutation. Failed calls never raise
to the caller: they are logged, surfaced as a toast, and prior state is kept.
"""

import logging
from typing import Callable, List, Optional

from task_tracker import config
from task_tracker.errors import TaskTrackerError
from task_tracker.models.task import Priority, Task

from . import derive
from .api_client import TaskApiClient
from .state import ClientState, EditBuffer, TaskFilter
from .timers import Timers

logger = logging.getLogger(__name__)

TOAST_TIMER = "toast"
UNDO_TIMER = "undo"
CELEBRATION_TIMER = "celebration"


class TaskController:
    """Holds the task list and UI state for one session"""

    def __init__(
        self,
        api: Optional[TaskApiClient] = None,
        toast_seconds: Optional[float] = None,
        undo_seconds: Optional[float] = None,
        celebration_seconds: Optional[float] = None,
    ):
        self.api = api or TaskApiClient()
        self.state = ClientState()
        self.timers = Timers()
        self.toast_seconds = toast_seconds if toast_seconds is not None else config.TOAST_SECONDS
        self.undo_seconds = undo_seconds if undo_seconds is not None else config.UNDO_SECONDS
        self.celebration_seconds = (
            celebration_seconds if celebration_seconds is not None else config.CELEBRATION_SECONDS
        )
        self._celebration_listeners: List[Callable[[], None]] = []

    async def __aenter__(self) -> "TaskController":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Cancel pending timers and release the HTTP client"""
        self.timers.cancel_all()
        await self.api.aclose()

    # Derived projections

    @property
    def total_count(self) -> int:
        return derive.total_count(self.state.tasks)

    @property
    def completed_count(self) -> int:
        return derive.completed_count(self.state.tasks)

    @property
    def active_count(self) -> int:
        return derive.active_count(self.state.tasks)

    @property
    def progress_percentage(self) -> float:
        return derive.progress_percentage(self.state.tasks)

    @property
    def filtered_tasks(self) -> List[Task]:
        return derive.filtered_tasks(self.state.tasks, self.state.filter, self.state.search_query)

    # Notifications

    def on_celebrate(self, listener: Callable[[], None]) -> None:
        """Register a callback fired when the last open task gets completed"""
        self._celebration_listeners.append(listener)

    def notify(self, message: str) -> None:
        """Show a transient toast message"""
        self.state.toast = message
        self.timers.schedule(TOAST_TIMER, self.toast_seconds, self._dismiss_toast)

    def _dismiss_toast(self) -> None:
        self.state.toast = None

    def _celebrate(self) -> None:
        logger.info("All tasks completed")
        self.state.celebrating = True
        self.notify("🎉 All tasks completed! Great job!")
        self.timers.schedule(CELEBRATION_TIMER, self.celebration_seconds, self._end_celebration)
        for listener in list(self._celebration_listeners):
            listener()

    def _end_celebration(self) -> None:
        self.state.celebrating = False

    def _expire_undo(self) -> None:
        self.state.deleted_task = None

    # Filters

    def set_filter(self, task_filter: TaskFilter) -> None:
        self.state.filter = TaskFilter(task_filter)

    def set_search(self, query: str) -> None:
        self.state.search_query = query

    # Intents

    async def fetch(self) -> bool:
        """Replace the local list with the server's; keep the old one on failure"""
        self.state.loading = True
        try:
            self.state.tasks = await self.api.list_tasks()
            return True
        except TaskTrackerError as e:
            logger.warning(f"Failed to fetch tasks: {e}")
            self.notify("Failed to fetch tasks")
            return False
        finally:
            self.state.loading = False

    async def add(self, title: str, priority: Priority = Priority.MEDIUM) -> bool:
        if not title or not title.strip():
            return False

        try:
            await self.api.create_task(title, priority=priority)
        except TaskTrackerError as e:
            logger.warning(f"Failed to add task: {e}")
            self.notify("Failed to add task")
            return False

        self.notify("Task added successfully! ✅")
        await self.fetch()
        return True

    async def toggle(self, task_id: str) -> bool:
        """
        Toggle a task's completion.

        The celebration fires when this toggle completed the task and the
        refetched list is non-empty and fully completed.
        """
        try:
            toggled = await self.api.toggle_task(task_id)
        except TaskTrackerError as e:
            logger.warning(f"Failed to toggle task {task_id}: {e}")
            self.notify("Failed to update task")
            return False

        await self.fetch()
        if toggled.completed and derive.all_completed(self.state.tasks):
            self._celebrate()
        return True

    def start_edit(self, task_id: str) -> bool:
        task = next((t for t in self.state.tasks if t.id == task_id), None)
        if task is None:
            return False
        self.state.editing = EditBuffer(task_id=task.id, draft=task.title)
        return True

    def update_draft(self, text: str) -> None:
        if self.state.editing is not None:
            self.state.editing.draft = text

    async def save_edit(self) -> bool:
        buffer = self.state.editing
        if buffer is None or not buffer.draft.strip():
            return False

        try:
            await self.api.update_task(buffer.task_id, title=buffer.draft)
        except TaskTrackerError as e:
            logger.warning(f"Failed to update task {buffer.task_id}: {e}")
            self.notify("Failed to update task")
            return False

        self.state.editing = None
        self.notify("Task updated! ✏️")
        await self.fetch()
        return True

    def cancel_edit(self) -> None:
        self.state.editing = None

    def handle_escape(self) -> bool:
        """Escape key: drop the edit buffer if an edit is in progress"""
        if self.state.editing is None:
            return False
        self.cancel_edit()
        return True

    async def delete(self, task_id: str) -> bool:
        snapshot = next((t for t in self.state.tasks if t.id == task_id), None)
        if snapshot is not None:
            # The previous expiry must not fire while this delete is in flight
            self.timers.cancel(UNDO_TIMER)
            self.state.deleted_task = snapshot

        try:
            await self.api.delete_task(task_id)
        except TaskTrackerError as e:
            logger.warning(f"Failed to delete task {task_id}: {e}")
            if snapshot is not None:
                self.state.deleted_task = None
            self.notify("Failed to delete task")
            return False

        self.notify("Task deleted")
        await self.fetch()
        if snapshot is not None:
            self.timers.schedule(UNDO_TIMER, self.undo_seconds, self._expire_undo)
        return True

    async def undo_delete(self) -> bool:
        """Re-create the last deleted task (with a new id) while the undo slot is filled"""
        snapshot = self.state.deleted_task
        if snapshot is None:
            return False

        try:
            restored = await self.api.create_task(
                snapshot.title,
                priority=snapshot.priority,
                created_at=snapshot.created_at,
            )
        except TaskTrackerError as e:
            logger.warning(f"Failed to restore task: {e}")
            self.notify("Failed to restore task")
            return False

        self.state.deleted_task = None
        self.timers.cancel(UNDO_TIMER)

        if snapshot.completed:
            try:
                await self.api.toggle_task(restored.id)
            except TaskTrackerError as e:
                logger.warning(f"Restored task {restored.id} but could not mark it completed: {e}")

        self.notify("Task restored! ↩️")
        await self.fetch()
        return True

    async def clear_completed(self) -> bool:
        """Delete every completed task one request at a time, then refetch"""
        failed = 0
        for task in [t for t in self.state.tasks if t.completed]:
            try:
                await self.api.delete_task(task.id)
            except TaskTrackerError as e:
                logger.warning(f"Failed to delete completed task {task.id}: {e}")
                failed += 1

        await self.fetch()
        if failed:
            self.notify("Failed to clear completed tasks")
            return False
        return True
