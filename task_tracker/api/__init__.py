# API module exports
from task_tracker.api import health, tasks
from task_tracker.api.base import api_router

__all__ = ["health", "tasks", "api_router"]
