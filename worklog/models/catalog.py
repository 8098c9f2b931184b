"""Catalog models: plain sets of unique strings."""

from sqlalchemy import Column, Integer, String

from worklog.core.database import Base


class ProjectCode(Base):
    __tablename__ = "project_codes"
    value_field = "code"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String, nullable=False, unique=True)


class TaskType(Base):
    __tablename__ = "task_types"
    value_field = "type"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String, nullable=False, unique=True)


class Link(Base):
    __tablename__ = "links"
    value_field = "url"

    id = Column(Integer, primary_key=True, index=True)
    url = Column(String, nullable=False, unique=True)
