"""
Daily summary - heures par tâche pour un jour donné.

Algorithme :
1. sessions dont start_time tombe dans le jour (une session à cheval sur
   minuit est entièrement comptée sur son jour de départ)
2. regroupement par tâche
3. chaque session fermée est arrondie au 0.5h supérieur, PUIS sommée
4. les sessions encore ouvertes comptent 0
5. les tâches à 0h sont retirées du résultat
"""

import math
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional

from dateutil.parser import isoparse
from sqlalchemy.orm import Session

from worklog.core.config import settings
from worklog.core.errors import ValidationError
from worklog.models.task import Task
from worklog.models.work_session import WorkSession
from worklog.schemas.summary import DailySummaryEntry, DailyTotal

ROUNDING_INCREMENT_HOURS = 0.5


def round_up_hours(start_time: Optional[datetime], end_time: Optional[datetime]) -> float:
    """Duration rounded UP to the next half hour; 0 for open or invalid intervals.

    1h10 -> 1.5, 2h00 -> 2.0, 1 minute -> 0.5
    """
    if start_time is None or end_time is None or end_time <= start_time:
        return 0.0
    increment_seconds = ROUNDING_INCREMENT_HOURS * 3600
    increments = math.ceil((end_time - start_time).total_seconds() / increment_seconds)
    return increments * ROUNDING_INCREMENT_HOURS


def parse_summary_date(value: Optional[str]) -> date:
    """ISO date from a query string, today when missing."""
    if value is None or not value.strip():
        return date.today()
    try:
        return isoparse(value.strip()).date()
    except (ValueError, OverflowError):
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")


def get_daily_summary(db: Session, target_date: date = None) -> List[DailySummaryEntry]:
    if target_date is None:
        target_date = date.today()
    day_start = datetime.combine(target_date, datetime.min.time())
    day_end = datetime.combine(target_date + timedelta(days=1), datetime.min.time())

    # JOIN : les sessions d'une tâche supprimée ne ressortent pas
    rows = (
        db.query(WorkSession, Task)
        .join(Task, Task.id == WorkSession.task_id)
        .filter(
            WorkSession.start_time >= day_start,
            WorkSession.start_time < day_end,
        )
        .order_by(Task.order_index.asc(), WorkSession.start_time.asc())
        .all()
    )

    entries: Dict[int, DailySummaryEntry] = {}
    for session, task in rows:
        entry = entries.get(task.id)
        if entry is None:
            entry = DailySummaryEntry(
                task_id=task.id,
                project_code=task.project_code,
                task_type=task.task_type,
                order_index=task.order_index,
                date=target_date,
                description=task.description or "",
            )
            entries[task.id] = entry
        entry.hours_spent += round_up_hours(session.start_time, session.end_time)

    return [entry for entry in entries.values() if entry.hours_spent > 0]


def daily_total(entries: List[DailySummaryEntry]) -> float:
    return sum(entry.hours_spent for entry in entries)


def is_day_met(total_hours: float, target_hours: float = None) -> bool:
    if target_hours is None:
        target_hours = settings.DAILY_TARGET_HOURS
    return total_hours >= target_hours


def get_daily_total(db: Session, target_date: date = None) -> DailyTotal:
    if target_date is None:
        target_date = date.today()
    total = daily_total(get_daily_summary(db, target_date))
    target = settings.DAILY_TARGET_HOURS
    return DailyTotal(
        date=target_date,
        total_hours=total,
        target_hours=target,
        met=is_day_met(total, target),
    )
