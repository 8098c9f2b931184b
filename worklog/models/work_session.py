from sqlalchemy import Column, DateTime, Integer, Index

from worklog.core.database import Base


class WorkSession(Base):
    __tablename__ = "work_sessions"

    id = Column(Integer, primary_key=True, index=True)
    # pas de FK : les sessions survivent à la suppression de la tâche
    task_id = Column(Integer, nullable=False, index=True)
    start_time = Column(DateTime, nullable=True, index=True)
    end_time = Column(DateTime, nullable=True)  # NULL tant que la tâche est in_progress

    __table_args__ = (
        Index("ix_work_sessions_task_open", "task_id", "end_time"),
        {"sqlite_autoincrement": True},
    )

    @property
    def is_open(self) -> bool:
        return self.end_time is None
