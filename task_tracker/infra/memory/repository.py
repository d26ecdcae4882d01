"""In-memory task repository

Keeps tasks in a dict for the lifetime of the process. Used for local
development (TASK_STORE_BACKEND=memory) and in tests.
"""
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from task_tracker.models.task import Task, TaskCreate, TaskUpdate


class InMemoryTaskRepository:
    """Repository for task operations backed by a dict"""

    def __init__(self):
        self._tasks: Dict[str, Task] = {}

    async def find_all(self) -> List[Task]:
        tasks = sorted(self._tasks.values(), key=lambda t: t.created_at, reverse=True)
        return [task.model_copy() for task in tasks]

    async def find_by_id(self, id: str) -> Optional[Task]:
        task = self._tasks.get(id)
        return task.model_copy() if task else None

    async def create(self, data: TaskCreate) -> Task:
        now = datetime.now(timezone.utc)
        task = Task(
            id=uuid.uuid4().hex,
            title=data.title,
            priority=data.priority,
            completed=data.completed,
            created_at=data.created_at or now,
            updated_at=data.updated_at or now,
        )
        self._tasks[task.id] = task
        return task.model_copy()

    async def update(self, id: str, data: TaskUpdate) -> Optional[Task]:
        task = self._tasks.get(id)
        if task is None:
            return None

        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            return task.model_copy()

        updated = task.model_copy(update=changes)
        self._tasks[id] = updated
        return updated.model_copy()

    async def delete(self, id: str) -> bool:
        return self._tasks.pop(id, None) is not None

    def clear(self) -> None:
        """Drop every stored task (useful for testing)"""
        self._tasks.clear()
