"""Pydantic schemas for task request/response validation."""

from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional

from worklog.models.task import TaskStatus


class TaskCreate(BaseModel):
    # Optional ici : l'absence est refusée par le service (ValidationError -> 400)
    project_code: Optional[str] = None
    task_type: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None


class TaskUpdate(BaseModel):
    """Schema for updating an existing task (only sent fields are applied)."""

    project_code: Optional[str] = None
    task_type: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None


class TaskResponse(BaseModel):
    id: int
    order_index: int
    project_code: str
    task_type: str
    description: Optional[str]
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
