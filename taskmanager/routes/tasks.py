# taskmanager/routes/tasks.py
"""CRUD endpoints for the caller's tasks."""

from fastapi import APIRouter, Depends, Request, Response
from sqlmodel import Session

from taskmanager.database import get_session
from taskmanager.dependencies import get_current_identity
from taskmanager.models import Task, TaskCreate, TaskRead, TaskUpdate
from taskmanager.security import Identity
from taskmanager.services import tasks as task_service

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def to_read(task: Task) -> TaskRead:
    return TaskRead.model_validate(task.model_dump())


@router.get("")
def list_tasks(
    identity: Identity = Depends(get_current_identity),
    session: Session = Depends(get_session),
) -> list[TaskRead]:
    """List the caller's tasks, newest first."""
    return [to_read(t) for t in task_service.list_tasks(session, identity.user_id)]


@router.get("/{task_id}")
def get_task(
    task_id: int,
    identity: Identity = Depends(get_current_identity),
    session: Session = Depends(get_session),
) -> TaskRead:
    """Get a single task by ID."""
    return to_read(task_service.get_task(session, identity.user_id, task_id))


@router.post("", status_code=201)
def create_task(
    body: TaskCreate,
    request: Request,
    response: Response,
    identity: Identity = Depends(get_current_identity),
    session: Session = Depends(get_session),
) -> TaskRead:
    """Create a new task."""
    task = task_service.create_task(session, identity.user_id, body.title, body.description)
    response.headers["Location"] = str(request.url_for("get_task", task_id=task.id))
    return to_read(task)


@router.put("/{task_id}")
def update_task(
    task_id: int,
    body: TaskUpdate,
    identity: Identity = Depends(get_current_identity),
    session: Session = Depends(get_session),
) -> TaskRead:
    """Replace a task's title, description and completion flag."""
    task = task_service.update_task(
        session,
        identity.user_id,
        task_id,
        body.title,
        body.description,
        body.is_completed,
    )
    return to_read(task)


@router.delete("/{task_id}", status_code=204)
def delete_task(
    task_id: int,
    identity: Identity = Depends(get_current_identity),
    session: Session = Depends(get_session),
) -> None:
    """Delete a task by ID."""
    task_service.delete_task(session, identity.user_id, task_id)
