"""Manual administration of work sessions (listing and corrections)."""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from worklog.core.errors import NotFoundError, StoreError, ValidationError
from worklog.models.work_session import WorkSession
from worklog.schemas.session import SessionUpdate

logger = logging.getLogger(__name__)


def list_sessions(
    db: Session,
    task_id: Optional[int] = None,
    start_from: Optional[datetime] = None,
    start_to: Optional[datetime] = None,
    active: bool = False,
) -> List[WorkSession]:
    query = db.query(WorkSession)
    if task_id is not None:
        query = query.filter(WorkSession.task_id == task_id)
    if start_from is not None:
        query = query.filter(WorkSession.start_time >= start_from)
    if start_to is not None:
        query = query.filter(WorkSession.start_time <= start_to)
    if active:
        query = query.filter(WorkSession.end_time.is_(None))
    return query.order_by(WorkSession.start_time.asc(), WorkSession.id.asc()).all()


def get_session(db: Session, session_id: int) -> WorkSession:
    session = db.query(WorkSession).filter(WorkSession.id == session_id).first()
    if not session:
        raise NotFoundError("Session not found")
    return session


def update_session(db: Session, session_id: int, data: SessionUpdate) -> WorkSession:
    session = get_session(db, session_id)
    start_time, end_time = data.start_time, data.end_time
    if start_time is not None and end_time is not None and end_time < start_time:
        raise ValidationError("end_time must not be before start_time")

    session.start_time = start_time
    session.end_time = end_time
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreError("Could not update session") from e
    db.refresh(session)
    logger.info(f"[work_sessions] corrected session_id={session_id} start={start_time} end={end_time}")
    return session


def delete_session(db: Session, session_id: int) -> None:
    session = get_session(db, session_id)
    try:
        db.delete(session)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreError("Could not delete session") from e
    logger.info(f"[work_sessions] deleted session_id={session_id}")
