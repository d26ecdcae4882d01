"""In-memory infrastructure module"""
from .repository import InMemoryTaskRepository

__all__ = ['InMemoryTaskRepository']
