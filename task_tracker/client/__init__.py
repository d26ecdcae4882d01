"""Client-side state controller and view derivations"""
from .api_client import TaskApiClient
from .controller import TaskController
from .state import ClientState, EditBuffer, TaskFilter
from .view import TaskListView, build_view

__all__ = [
    'TaskApiClient',
    'TaskController',
    'ClientState',
    'EditBuffer',
    'TaskFilter',
    'TaskListView',
    'build_view',
]
