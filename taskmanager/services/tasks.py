# taskmanager/services/tasks.py
"""Task CRUD scoped to the owning user.

Every function takes the authenticated user's id. A task owned by someone
else is reported exactly like a task that does not exist.
"""

import logging
from typing import Optional

from sqlmodel import Session, select

from taskmanager.errors import NotFoundError, ValidationError
from taskmanager.models import TITLE_MAX_LENGTH, Task, utcnow

logger = logging.getLogger(__name__)


def _owned_task(session: Session, user_id: int, task_id: int) -> Task:
    statement = select(Task).where(Task.id == task_id, Task.user_id == user_id)
    task = session.exec(statement).first()
    if task is None:
        raise NotFoundError("Task not found")
    return task


def _require_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        raise ValidationError("Title is required")
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(f"Title must be at most {TITLE_MAX_LENGTH} characters")
    return title


def list_tasks(session: Session, user_id: int) -> list[Task]:
    """All of the user's tasks, newest first."""
    statement = (
        select(Task)
        .where(Task.user_id == user_id)
        .order_by(Task.created_at.desc(), Task.id.desc())
    )
    return list(session.exec(statement).all())


def get_task(session: Session, user_id: int, task_id: int) -> Task:
    return _owned_task(session, user_id, task_id)


def create_task(
    session: Session, user_id: int, title: Optional[str], description: Optional[str]
) -> Task:
    """Create a task. Owner, timestamps and completion are set here, not by the caller."""
    task = Task(
        user_id=user_id,
        title=_require_title(title),
        description=description or "",
        is_completed=False,
        created_at=utcnow(),
        completed_at=None,
    )
    session.add(task)
    session.commit()
    session.refresh(task)
    logger.info("Task created: %s by User: %s", task.id, user_id)
    return task


def update_task(
    session: Session,
    user_id: int,
    task_id: int,
    title: Optional[str],
    description: Optional[str],
    is_completed: bool,
) -> Task:
    """Replace title, description and completion flag.

    completed_at is stamped on a false -> true transition and cleared
    whenever the incoming flag is false.
    """
    task = _owned_task(session, user_id, task_id)
    title = _require_title(title)

    if is_completed and not task.is_completed:
        task.completed_at = utcnow()
    elif not is_completed:
        task.completed_at = None

    task.title = title
    task.description = description or ""
    task.is_completed = is_completed

    session.add(task)
    session.commit()
    session.refresh(task)
    logger.info("Task updated: %s", task_id)
    return task


def delete_task(session: Session, user_id: int, task_id: int) -> None:
    task = _owned_task(session, user_id, task_id)
    session.delete(task)
    session.commit()
    logger.info("Task deleted: %s", task_id)
