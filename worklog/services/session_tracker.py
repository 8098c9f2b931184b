"""
Session tracker - opens and closes work sessions on task status changes.

Règles (évaluées à chaque changement de statut) :
1. autre statut -> in_progress : ouvre une session (start_time = now, end_time = NULL)
2. in_progress -> autre statut : ferme la dernière session ouverte de la tâche
3. sinon : rien

Une tâche créée directement en in_progress passe par la règle 1 (old_status = None).

Le tracker ne lève jamais vers l'appelant : une incohérence (pas de session à
fermer, session déjà ouverte, erreur de base) est loggée et renvoyée dans
le TransitionOutcome. La mise à jour de la tâche reste commitée.
"""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from worklog.core.errors import SessionConsistencyAnomaly
from worklog.models.task import TaskStatus
from worklog.models.work_session import WorkSession

logger = logging.getLogger(__name__)

OPENED = "opened"
CLOSED = "closed"
NONE = "none"


@dataclass
class TransitionOutcome:
    task_id: int
    action: str = NONE
    session: Optional[WorkSession] = None
    anomaly: Optional[SessionConsistencyAnomaly] = None

    @property
    def ok(self) -> bool:
        return self.anomaly is None


# un verrou par tâche : la recherche de session ouverte puis l'écriture
_locks_guard = threading.Lock()
_task_locks: Dict[int, threading.Lock] = {}


def _lock_for(task_id: int) -> threading.Lock:
    with _locks_guard:
        return _task_locks.setdefault(task_id, threading.Lock())


def forget_task(task_id: int) -> None:
    """Drop the lock of a deleted task."""
    with _locks_guard:
        _task_locks.pop(task_id, None)


def _status_value(status) -> Optional[str]:
    if isinstance(status, TaskStatus):
        return status.value
    return status


def is_entering(old_status, new_status) -> bool:
    old, new = _status_value(old_status), _status_value(new_status)
    return new == TaskStatus.IN_PROGRESS.value and old != TaskStatus.IN_PROGRESS.value


def is_leaving(old_status, new_status) -> bool:
    old, new = _status_value(old_status), _status_value(new_status)
    return old == TaskStatus.IN_PROGRESS.value and new != TaskStatus.IN_PROGRESS.value


def find_open_session(db: Session, task_id: int) -> Optional[WorkSession]:
    """Most recently opened session of the task that has no end_time."""
    return (
        db.query(WorkSession)
        .filter(WorkSession.task_id == task_id, WorkSession.end_time.is_(None))
        .order_by(WorkSession.start_time.desc(), WorkSession.id.desc())
        .first()
    )


def transition(db: Session, task_id: int, old_status, new_status, now: datetime = None) -> TransitionOutcome:
    entering = is_entering(old_status, new_status)
    leaving = is_leaving(old_status, new_status)
    if not (entering or leaving):
        return TransitionOutcome(task_id=task_id)

    if now is None:
        now = datetime.now()

    with _lock_for(task_id):
        try:
            if entering:
                return _open_session(db, task_id, now)
            return _close_session(db, task_id, now)
        except SQLAlchemyError as e:
            db.rollback()
            return _report(task_id, f"session bookkeeping failed: {e}")


def _report(task_id: int, reason: str, session: WorkSession = None) -> TransitionOutcome:
    anomaly = SessionConsistencyAnomaly(
        task_id=task_id,
        reason=reason,
        session_id=session.id if session is not None else None,
    )
    logger.warning(f"[work_sessions] anomaly {anomaly}")
    return TransitionOutcome(task_id=task_id, session=session, anomaly=anomaly)


def _open_session(db: Session, task_id: int, now: datetime) -> TransitionOutcome:
    existing = find_open_session(db, task_id)
    if existing is not None:
        # historique déjà incohérent : on n'ouvre pas une 2e session
        return _report(task_id, "task already has an open session", existing)

    session = WorkSession(task_id=task_id, start_time=now)
    db.add(session)
    db.commit()
    db.refresh(session)
    logger.info(f"[work_sessions] opened session_id={session.id} task_id={task_id} at {now.isoformat()}")
    return TransitionOutcome(task_id=task_id, action=OPENED, session=session)


def _close_session(db: Session, task_id: int, now: datetime) -> TransitionOutcome:
    session = find_open_session(db, task_id)
    if session is None:
        return _report(task_id, "no open session to close")

    session.end_time = now
    db.commit()
    db.refresh(session)
    logger.info(f"[work_sessions] closed session_id={session.id} task_id={task_id} at {now.isoformat()}")
    return TransitionOutcome(task_id=task_id, action=CLOSED, session=session)
