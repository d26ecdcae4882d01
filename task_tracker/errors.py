"""Error taxonomy shared by the store, the API and the client"""
from typing import Optional


class TaskTrackerError(Exception):
    """Base class for task tracker errors"""


class ValidationError(TaskTrackerError, ValueError):
    """A required field is missing or empty"""


class NotFound(TaskTrackerError, LookupError):
    """An operation referenced a task id that does not exist"""

    def __init__(self, task_id: Optional[str] = None, message: str = "Task not found"):
        super().__init__(message)
        self.task_id = task_id


class TransportFailure(TaskTrackerError):
    """The API or the store could not be reached, or answered unexpectedly"""
