"""
Task Store

Business rules for the task lifecycle on top of a repository:
- title validation on create and update
- defaults for priority and creation time
- completion toggling
- not-found handling
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from task_tracker.errors import NotFound, ValidationError
from task_tracker.infra.ports import TaskRepository
from task_tracker.models.task import Priority, Task, TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)

TITLE_REQUIRED = "Title is required"


def _clean_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        raise ValidationError(TITLE_REQUIRED)
    return title


class TaskStore:
    """Service for managing tasks"""

    def __init__(self, repository: TaskRepository):
        self.task_repo = repository

    async def create(
        self,
        title: Optional[str],
        priority: Optional[Priority] = None,
        created_at: Optional[datetime] = None,
    ) -> Task:
        """
        Create a new task.

        Args:
            title: Task title, must not be blank
            priority: Optional priority (defaults to medium)
            created_at: Optional creation time (defaults to now)

        Returns:
            The created task

        Raises:
            ValidationError: If the title is missing or blank
        """
        task_data = TaskCreate(
            title=_clean_title(title),
            priority=priority or Priority.MEDIUM,
            created_at=created_at or datetime.now(timezone.utc),
        )

        task = await self.task_repo.create(task_data)
        logger.info(f"Created task {task.id} with priority '{task.priority.value}'")
        return task

    async def list(self) -> List[Task]:
        """Get all tasks, newest first"""
        return await self.task_repo.find_all()

    async def get_by_id(self, task_id: str) -> Task:
        """
        Get a single task by ID.

        Raises:
            NotFound: If no task has this ID
        """
        task = await self.task_repo.find_by_id(task_id)
        if task is None:
            raise NotFound(task_id)
        return task

    async def update(
        self,
        task_id: str,
        title: Optional[str] = None,
        priority: Optional[Priority] = None,
    ) -> Task:
        """
        Apply a partial update. Only the provided fields change.

        Args:
            task_id: The task ID to update
            title: New title, must not be blank when provided
            priority: New priority

        Returns:
            The updated task

        Raises:
            ValidationError: If a blank title is provided
            NotFound: If no task has this ID
        """
        if title is not None:
            title = _clean_title(title)

        update_data = TaskUpdate(
            title=title,
            priority=priority,
            updated_at=datetime.now(timezone.utc),
        )
        task = await self.task_repo.update(task_id, update_data)
        if task is None:
            raise NotFound(task_id)

        logger.info(f"Updated task {task_id}")
        return task

    async def toggle(self, task_id: str) -> Task:
        """
        Flip the completed flag of a task.

        Raises:
            NotFound: If no task has this ID
        """
        current = await self.get_by_id(task_id)
        update_data = TaskUpdate(
            completed=not current.completed,
            updated_at=datetime.now(timezone.utc),
        )
        task = await self.task_repo.update(task_id, update_data)
        if task is None:
            raise NotFound(task_id)

        logger.info(f"Toggled task {task_id} to completed={task.completed}")
        return task

    async def delete(self, task_id: str) -> None:
        """Delete a task. Deleting an unknown ID is not an error."""
        deleted = await self.task_repo.delete(task_id)
        if deleted:
            logger.info(f"Deleted task {task_id}")
        else:
            logger.debug(f"Delete of unknown task {task_id} ignored")
