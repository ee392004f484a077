import logging
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.auth import get_current_user
from ..core.database import get_db
from ..core.errors import ForbiddenError, NotFoundError, ValidationError, translate_errors
from ..models.task import Task
from ..models.user import User
from ..schemas.common import MessageResponse, success
from ..schemas.task import TaskPayload, TaskOut
from ..utils.validation import validate_object_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


def require_valid_task_id(task_id: str) -> None:
    if not validate_object_id(task_id):
        raise ValidationError("Task id not valid")


def load_owned_task(db: Session, task_id: str, current_user: User, action: str) -> Task:
    """Fetch a task by id and make sure the acting user owns it"""
    task = Task.find_by_id(db, task_id)
    if not task:
        raise NotFoundError("Task with given id not found")
    if not task.is_owned_by(current_user.id):
        logger.warning(f"User {current_user.id} tried to {action} task {task_id} of user {task.user_id}")
        raise ForbiddenError(f"You can't {action} task of another user")
    return task


@router.get("")
@translate_errors
def get_tasks(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the authenticated user's tasks, newest first"""
    tasks = Task.find_all(db, current_user.id)
    return success("Tasks found successfully..", tasks=[TaskOut.dump(task) for task in tasks])


@router.get("/{task_id}")
@translate_errors
def get_task(
    task_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a specific task by ID"""
    require_valid_task_id(task_id)
    task = Task.find_one(db, task_id, current_user.id)
    if not task:
        raise NotFoundError("No task found..")
    return success("Task found successfully..", task=TaskOut.dump(task))


@router.post("")
@translate_errors
def create_task(
    payload: Optional[TaskPayload] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a new task for the authenticated user"""
    data = (payload or TaskPayload()).parse()
    task = Task.create(
        db,
        title=data.title,
        description=data.description,
        completed=bool(data.completed),
        user_id=current_user.id,
    )
    logger.info(f"User {current_user.id} created task {task.id}")
    return success("Task created successfully..", task=TaskOut.dump(task))


@router.put("/{task_id}")
@translate_errors
def update_task(
    task_id: str,
    payload: Optional[TaskPayload] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update title, description and completion of an owned task"""
    require_valid_task_id(task_id)
    data = (payload or TaskPayload()).parse()
    task = load_owned_task(db, task_id, current_user, "update")
    task = task.apply_update(db, data.title, data.description, data.completed)
    return success("Task updated successfully..", task=TaskOut.dump(task))


@router.delete("/{task_id}", response_model=MessageResponse)
@translate_errors
def delete_task(
    task_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete an owned task"""
    require_valid_task_id(task_id)
    task = load_owned_task(db, task_id, current_user, "delete")
    task.delete(db)
    logger.info(f"User {current_user.id} deleted task {task_id}")
    return success("Task deleted successfully..")
