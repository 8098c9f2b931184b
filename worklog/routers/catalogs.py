"""Project codes, task types and links: create / list / delete over string sets."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from worklog.core.database import get_db
from worklog.models.catalog import Link, ProjectCode, TaskType
from worklog.schemas.catalog import LinkCreate, ProjectCodeCreate, TaskTypeCreate
from worklog.services import catalog_service

project_codes = APIRouter(prefix="/api/project_codes", tags=["project_codes"])
task_types = APIRouter(prefix="/api/task_types", tags=["task_types"])
links = APIRouter(prefix="/api/links", tags=["links"])


# ============ PROJECT CODES ============

@project_codes.get("", response_model=List[str])
def list_project_codes(db: Session = Depends(get_db)):
    return catalog_service.list_values(db, ProjectCode)


@project_codes.post("")
def create_project_code(payload: ProjectCodeCreate, db: Session = Depends(get_db)):
    catalog_service.add_value(db, ProjectCode, payload.code)
    return {"success": True}


@project_codes.delete("/{code}")
def delete_project_code(code: str, db: Session = Depends(get_db)):
    catalog_service.remove_value(db, ProjectCode, code)
    return {"success": True}


# ============ TASK TYPES ============

@task_types.get("", response_model=List[str])
def list_task_types(db: Session = Depends(get_db)):
    return catalog_service.list_values(db, TaskType)


@task_types.post("")
def create_task_type(payload: TaskTypeCreate, db: Session = Depends(get_db)):
    catalog_service.add_value(db, TaskType, payload.type)
    return {"success": True}


@task_types.delete("/{task_type}")
def delete_task_type(task_type: str, db: Session = Depends(get_db)):
    catalog_service.remove_value(db, TaskType, task_type)
    return {"success": True}


# ============ LINKS ============

@links.get("", response_model=List[str])
def list_links(db: Session = Depends(get_db)):
    return catalog_service.list_values(db, Link)


@links.post("")
def create_link(payload: LinkCreate, db: Session = Depends(get_db)):
    catalog_service.add_value(db, Link, payload.url)
    return {"success": True}


# les URLs contiennent des "/"
@links.delete("/{url:path}")
def delete_link(url: str, db: Session = Depends(get_db)):
    catalog_service.remove_value(db, Link, url)
    return {"success": True}
