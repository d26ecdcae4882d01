"""Infrastructure adapters"""
from .ports import TaskRepository

__all__ = ['TaskRepository']
