"""Repository exports"""
from .base import BaseRepository
from .tasks import SupabaseTaskRepository

__all__ = [
    'BaseRepository',
    'SupabaseTaskRepository',
]
