"""Task service"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from worklog.core.errors import ValidationError
from worklog.models.task import Task, TaskStatus
from worklog.schemas.task import TaskCreate, TaskUpdate
from worklog.services import session_tracker, task_store
from worklog.services.session_tracker import TransitionOutcome

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("project_code", "task_type")


@dataclass
class TaskMutation:
    """Committed task + outcome of the session bookkeeping that followed it."""

    task: Task
    session: TransitionOutcome


def _require(field: str, value) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required")
    return str(value).strip()


def create_task(db: Session, data: TaskCreate, now: datetime = None) -> TaskMutation:
    project_code = _require("project_code", data.project_code)
    task_type = _require("task_type", data.task_type)
    if data.status is None:
        raise ValidationError("status is required")
    status = TaskStatus(data.status).value

    task = task_store.create_task(
        db,
        project_code=project_code,
        task_type=task_type,
        description=data.description or "",
        status=status,
    )
    logger.info(f"Created task id={task.id} order_index={task.order_index} status={status}")

    # aucune tâche -> in_progress compte comme une entrée dans in_progress
    outcome = session_tracker.transition(db, task.id, None, status, now=now)
    return TaskMutation(task=task, session=outcome)


def update_task(db: Session, task_id: int, data: TaskUpdate, now: datetime = None) -> TaskMutation:
    task = task_store.get_task(db, task_id)
    # statut AVANT écriture : entrée obligatoire de la règle de transition
    old_status = task.status

    fields = data.model_dump(exclude_unset=True)
    for field in REQUIRED_FIELDS:
        if field in fields:
            fields[field] = _require(field, fields[field])
    if "status" in fields:
        if fields["status"] is None:
            raise ValidationError("status cannot be null")
        fields["status"] = TaskStatus(fields["status"]).value
    if "description" in fields and fields["description"] is None:
        fields["description"] = ""

    task = task_store.update_task(db, task_id, fields)
    outcome = session_tracker.transition(db, task.id, old_status, task.status, now=now)
    return TaskMutation(task=task, session=outcome)


def delete_task(db: Session, task_id: int) -> None:
    # les sessions de la tâche sont conservées, même si l'une est ouverte
    task_store.delete_task(db, task_id)
    session_tracker.forget_task(task_id)
    logger.info(f"Deleted task id={task_id}")


def get_task(db: Session, task_id: int) -> Task:
    return task_store.get_task(db, task_id)


def list_tasks(db: Session) -> List[Task]:
    return task_store.list_tasks(db)
