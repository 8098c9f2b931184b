import logging
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base

from worklog.core.config import settings

logger = logging.getLogger(__name__)

DATABASE_URL = settings.DATABASE_URL

DEFAULT_PROJECT_CODES = ["SuperCloud Composer", "ProjectX", "DemoProject"]
DEFAULT_TASK_TYPES = [
    "Implement", "Meeting", "Test", "Survey", "Bug Fix", "Support",
    "Trouble Shooting", "Take Leave", "Document", "Operation", "Design",
    "Misc", "Training", "Project Management", "Manager Task", "POC",
]


def _build_engine(url: str):
    connect_args = {}
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        if parsed.database and parsed.database != ":memory:":
            Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, echo=False, connect_args=connect_args)


engine = _build_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    """Dépendance sessionDB"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None, seed: bool = None):
    """Create tables and seed the default catalogs when they are empty."""
    # import des modèles pour enregistrer les tables sur Base.metadata
    from worklog.models import catalog, task, work_session  # noqa: F401
    from worklog.models.catalog import ProjectCode, TaskType

    bind = bind or engine
    Base.metadata.create_all(bind=bind)

    if seed is None:
        seed = settings.SEED_DEFAULTS
    if not seed:
        return

    db = SessionLocal(bind=bind)
    try:
        if db.query(ProjectCode).count() == 0:
            db.add_all([ProjectCode(code=code) for code in DEFAULT_PROJECT_CODES])
            logger.info(f"Seeded {len(DEFAULT_PROJECT_CODES)} project codes")
        if db.query(TaskType).count() == 0:
            db.add_all([TaskType(type=name) for name in DEFAULT_TASK_TYPES])
            logger.info(f"Seeded {len(DEFAULT_TASK_TYPES)} task types")
        db.commit()
    finally:
        db.close()
