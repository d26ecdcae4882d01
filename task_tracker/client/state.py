"""Client-side state models"""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel

from task_tracker.models.task import Task


class TaskFilter(str, Enum):
    """Which tasks the list shows"""
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


class EditBuffer(BaseModel):
    """The single task being edited and its draft title"""
    task_id: str
    draft: str


class ClientState(BaseModel):
    """Everything the controller holds for one session"""
    tasks: List[Task] = []
    filter: TaskFilter = TaskFilter.ALL
    search_query: str = ""
    editing: Optional[EditBuffer] = None
    deleted_task: Optional[Task] = None  # undo slot
    loading: bool = False
    toast: Optional[str] = None
    celebrating: bool = False
