from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from worklog.core.database import get_db
from worklog.schemas.summary import DailySummaryEntry, DailyTotal
from worklog.services.summary_service import get_daily_summary, get_daily_total, parse_summary_date

router = APIRouter(prefix="/api/summary", tags=["summary"])


@router.get("/today", response_model=List[DailySummaryEntry])
def daily_summary(
    date: Optional[str] = Query(None, description="YYYY-MM-DD, aujourd'hui par défaut"),
    db: Session = Depends(get_db),
):
    return get_daily_summary(db, parse_summary_date(date))


@router.get("/total", response_model=DailyTotal)
def daily_total(
    date: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    return get_daily_total(db, parse_summary_date(date))
