from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from worklog.core.database import get_db
from worklog.schemas.task import TaskCreate, TaskUpdate, TaskResponse
from worklog.services import task_service

router = APIRouter(prefix="/api/todos", tags=["tasks"])


@router.get("", response_model=List[TaskResponse])
def list_tasks(db: Session = Depends(get_db)):
    return task_service.list_tasks(db)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(task_data: TaskCreate, db: Session = Depends(get_db)):
    """
    Crée une tâche avec le prochain order_index.

    Si la tâche est créée directement en in_progress, une session de travail
    est ouverte tout de suite.
    """
    return task_service.create_task(db, task_data).task


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: int, db: Session = Depends(get_db)):
    return task_service.get_task(db, task_id)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(task_id: int, task_data: TaskUpdate, db: Session = Depends(get_db)):
    """
    Met à jour la tâche puis applique la transition de session
    (entrée / sortie de in_progress).

    Une incohérence côté sessions est loggée mais ne fait pas échouer la requête.
    """
    return task_service.update_task(db, task_id, task_data).task


@router.delete("/{task_id}")
def delete_task(task_id: int, db: Session = Depends(get_db)):
    task_service.delete_task(db, task_id)
    return {"success": True}
