"""Task store: persistence of tasks, nothing else."""

import logging
import threading
from typing import List

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from worklog.core.errors import NotFoundError, StoreError
from worklog.models.task import Counter, Task

logger = logging.getLogger(__name__)

ORDER_COUNTER = "task_order"

# lecture du compteur + insert doivent être atomiques entre deux créations
_order_lock = threading.Lock()


def _next_order_index(db: Session) -> int:
    counter = db.query(Counter).filter(Counter.name == ORDER_COUNTER).with_for_update().first()
    if counter is None:
        # base existante sans compteur : on repart du max
        current = db.query(func.max(Task.order_index)).scalar() or 0
        counter = Counter(name=ORDER_COUNTER, value=current)
        db.add(counter)
    counter.value += 1
    return counter.value


def create_task(db: Session, project_code: str, task_type: str, description: str, status: str) -> Task:
    with _order_lock:
        try:
            task = Task(
                order_index=_next_order_index(db),
                project_code=project_code,
                task_type=task_type,
                description=description,
                status=status,
            )
            db.add(task)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Task insert failed: {e}")
            raise StoreError("Could not create task") from e
    db.refresh(task)
    return task


def get_task(db: Session, task_id: int) -> Task:
    task = db.query(Task).filter(Task.id == task_id).first()
    if not task:
        raise NotFoundError("Task not found")
    return task


def list_tasks(db: Session) -> List[Task]:
    return db.query(Task).order_by(Task.order_index.asc()).all()


def update_task(db: Session, task_id: int, fields: dict) -> Task:
    task = get_task(db, task_id)
    for field, value in fields.items():
        setattr(task, field, value)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Task update failed for task_id={task.id}: {e}")
        raise StoreError("Could not update task") from e
    db.refresh(task)
    return task


def delete_task(db: Session, task_id: int) -> None:
    task = get_task(db, task_id)
    try:
        db.delete(task)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Task delete failed for task_id={task_id}: {e}")
        raise StoreError("Could not delete task") from e
