"""Database models for the Task Manager API."""
from .user import User
from .task import Task

__all__ = ["User", "Task"]
