"""Task Manager API - signup/login, profile lookup and task CRUD."""

__version__ = "1.0.0"
