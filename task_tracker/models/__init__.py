"""Domain models for the application"""
from .task import Priority, Task, TaskCreate, TaskUpdate

__all__ = [
    'Priority', 'Task', 'TaskCreate', 'TaskUpdate',
]
