"""Shared FastAPI dependencies"""
import logging
from typing import Optional

from task_tracker import config
from task_tracker.infra.memory import InMemoryTaskRepository
from task_tracker.infra.ports import TaskRepository
from task_tracker.services.task_store import TaskStore

logger = logging.getLogger(__name__)

_memory_repository: Optional[InMemoryTaskRepository] = None


def _build_repository() -> TaskRepository:
    global _memory_repository

    backend = config.TASK_STORE_BACKEND
    if backend == "memory":
        if _memory_repository is None:
            logger.info("Using in-memory task store")
            _memory_repository = InMemoryTaskRepository()
        return _memory_repository

    if backend == "supabase":
        from task_tracker.infra.supabase import get_supabase_client
        from task_tracker.infra.supabase.repositories import SupabaseTaskRepository

        return SupabaseTaskRepository(get_supabase_client())

    raise ValueError(f"Unsupported TASK_STORE_BACKEND: {backend}")


def get_task_store() -> TaskStore:
    """
    Dependency function for FastAPI routes.

    Usage:
        @router.get("")
        async def example(store: TaskStore = Depends(get_task_store)):
            ...
    """
    return TaskStore(_build_repository())
