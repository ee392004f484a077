"""Core modules for the Task Manager API."""
