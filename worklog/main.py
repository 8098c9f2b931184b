import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from worklog.core.config import settings
from worklog.core.database import init_db
from worklog.core.errors import WorklogError
from worklog.core.logging_setup import setup_logging
from worklog.routers import catalogs, health, sessions, summary, tasks

setup_logging()
logger = logging.getLogger(__name__)

# Init DB
init_db()

app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0"
)


@app.exception_handler(WorklogError)
async def worklog_error_handler(request: Request, exc: WorklogError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    if settings.REQUEST_LOG:
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
    return response


# Routes
app.include_router(health.router, prefix="/health")
app.include_router(tasks.router)
app.include_router(sessions.router)
app.include_router(summary.router)
app.include_router(catalogs.project_codes)
app.include_router(catalogs.task_types)
app.include_router(catalogs.links)
