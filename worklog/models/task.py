"""Task model"""

import enum
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime
from worklog.core.database import Base


class TaskStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    ARCHIVE = "archive"


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    order_index = Column(Integer, unique=True, nullable=False, index=True)  # jamais réutilisé

    project_code = Column(String, nullable=False)
    task_type = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    status = Column(String, nullable=False, default=TaskStatus.PENDING.value)

    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    # AUTOINCREMENT : un id supprimé n'est jamais redonné (les sessions gardent task_id)
    __table_args__ = {"sqlite_autoincrement": True}


class Counter(Base):
    """Named monotonic sequences (task order index)."""

    __tablename__ = "counters"

    name = Column(String, primary_key=True)
    value = Column(Integer, nullable=False, default=0)
