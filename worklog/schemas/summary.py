import datetime as dt

from pydantic import BaseModel


class DailySummaryEntry(BaseModel):
    task_id: int
    project_code: str
    task_type: str
    order_index: int
    date: dt.date
    description: str = ""
    hours_spent: float = 0.0


class DailyTotal(BaseModel):
    date: dt.date
    total_hours: float = 0.0
    target_hours: float
    met: bool = False
