"""Pydantic schemas for the Task Manager API."""
