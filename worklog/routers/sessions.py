from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from worklog.core.database import get_db
from worklog.schemas.session import SessionResponse, SessionUpdate
from worklog.services import session_service

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.get("", response_model=List[SessionResponse])
def list_sessions(
    db: Session = Depends(get_db),
    todo_id: Optional[int] = Query(None),
    start_from: Optional[datetime] = Query(None, alias="from"),
    start_to: Optional[datetime] = Query(None, alias="to"),
    active: bool = Query(False),
):
    return session_service.list_sessions(
        db,
        task_id=todo_id,
        start_from=start_from,
        start_to=start_to,
        active=active,
    )


@router.put("/{session_id}", response_model=SessionResponse)
def update_session(session_id: int, payload: SessionUpdate, db: Session = Depends(get_db)):
    return session_service.update_session(db, session_id, payload)


@router.delete("/{session_id}")
def delete_session(session_id: int, db: Session = Depends(get_db)):
    session_service.delete_session(db, session_id)
    return {"success": True}
