"""API routers for the Task Manager API."""
