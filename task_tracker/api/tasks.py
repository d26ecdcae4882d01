from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from task_tracker.api.deps import get_task_store
from task_tracker.models.task import Priority, Task
from task_tracker.services.task_store import TaskStore

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


# Request models for CRUD operations
class CreateTaskRequest(BaseModel):
    # Optional so a missing title is reported as "Title is required"
    title: Optional[str] = None
    priority: Optional[Priority] = None
    created_at: Optional[datetime] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class UpdateTaskRequest(BaseModel):
    title: Optional[str] = None
    priority: Optional[Priority] = None


# CRUD Endpoints
@router.get("", response_model=List[Task])
async def list_tasks(store: TaskStore = Depends(get_task_store)):
    """List all tasks, newest first"""
    return await store.list()


@router.get("/{task_id}", response_model=Task)
async def get_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Get a single task by ID"""
    return await store.get_by_id(task_id)


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(request: CreateTaskRequest, store: TaskStore = Depends(get_task_store)):
    """Create a new task"""
    return await store.create(
        title=request.title,
        priority=request.priority,
        created_at=request.created_at,
    )


@router.patch("/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    store: TaskStore = Depends(get_task_store),
):
    """Update the title and/or priority of a task"""
    return await store.update(task_id, title=request.title, priority=request.priority)


@router.patch("/{task_id}/toggle", response_model=Task)
async def toggle_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Flip the completed flag of a task"""
    return await store.toggle(task_id)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Delete a task"""
    await store.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
