from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class SessionUpdate(BaseModel):
    """Manual correction of a work session."""
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


class SessionResponse(BaseModel):
    id: int
    task_id: int
    start_time: Optional[datetime]
    end_time: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)
