"""
Pydantic schemas for tasks.
"""
from typing import Any, NamedTuple, Optional
from pydantic import BaseModel, Field

from ..core.errors import ValidationError
from .common import DocumentOut, is_blank


class TaskData(NamedTuple):
    title: str
    description: str
    completed: Optional[bool] = None


class TaskPayload(BaseModel):
    """Raw body for creating or updating a task"""
    title: Any = None
    description: Any = None
    completed: Any = None

    def parse(self) -> TaskData:
        if is_blank(self.title) or is_blank(self.description):
            raise ValidationError("Title or description of task not found")
        if not isinstance(self.title, str) or not isinstance(self.description, str):
            raise ValidationError("Please send string values only")
        if self.completed is not None and not isinstance(self.completed, bool):
            raise ValidationError("Completed must be a boolean")
        return TaskData(self.title, self.description, self.completed)


class TaskOut(DocumentOut):
    title: str = Field(..., description="Task title")
    description: str = Field(..., description="Task description")
    completed: bool = Field(False, description="Whether the task is done")
    user: str = Field(..., validation_alias="user_id", description="ID of the user who owns the task")
