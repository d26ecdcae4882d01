"""Task repository"""
from datetime import datetime, timezone
from typing import List, Optional

from supabase import Client  # type: ignore

from task_tracker import config
from task_tracker.models.task import Task, TaskCreate, TaskUpdate

from .base import BaseRepository


class SupabaseTaskRepository(BaseRepository[Task, TaskCreate, TaskUpdate]):
    """Repository for task operations"""
    
    def __init__(self, client: Client, table_name: Optional[str] = None):
        super().__init__(client, table_name or config.TASKS_TABLE, Task)
    
    async def find_all(self) -> List[Task]:
        """Find all tasks, newest first"""
        return await self.find_ordered("created_at", desc=True)
    
    async def create(self, data: TaskCreate) -> Task:
        """Create a task, stamping created_at/updated_at when the caller did not"""
        now = datetime.now(timezone.utc)
        stamped = data.model_copy(update={
            "created_at": data.created_at or now,
            "updated_at": data.updated_at or now,
        })
        return await super().create(stamped)
