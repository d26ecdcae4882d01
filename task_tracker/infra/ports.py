"""Port interface for task persistence (repository boundary)."""
from typing import List, Optional, Protocol, runtime_checkable

from task_tracker.models.task import Task, TaskCreate, TaskUpdate


@runtime_checkable
class TaskRepository(Protocol):
    """Task repository abstraction used by the task store."""

    async def find_all(self) -> List[Task]:
        """Return every task, newest first."""

    async def find_by_id(self, id: str) -> Optional[Task]:
        """Return a task by id or None when missing."""

    async def create(self, data: TaskCreate) -> Task:
        """Persist a new task and return the stored entity."""

    async def update(self, id: str, data: TaskUpdate) -> Optional[Task]:
        """Apply the set fields and return the stored task, or None when missing."""

    async def delete(self, id: str) -> bool:
        """Remove a task; False when nothing was deleted."""
