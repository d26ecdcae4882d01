"""Task domain model"""
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class Priority(str, Enum):
    """Task priority"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskBase(BaseModel):
    """Base task fields for creation"""
    title: str
    priority: Priority = Priority.MEDIUM

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class TaskCreate(TaskBase):
    """Task creation model"""
    completed: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TaskUpdate(BaseModel):
    """Task update model - all fields optional"""
    title: Optional[str] = None
    priority: Optional[Priority] = None
    completed: Optional[bool] = None
    updated_at: Optional[datetime] = None


class Task(TaskBase):
    """Complete task model from the store"""
    id: str
    completed: bool = False
    created_at: datetime
    updated_at: Optional[datetime] = None
