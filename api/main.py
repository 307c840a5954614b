import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core import config
from core.db import Database
from core.errors import NotFoundError, StorageError
from core.logging_setup import setup_logging
from core.scheduler import build_scheduler
from goals import router as goals_router
from reports.daily import DailyIncompleteTasksReport
from tasks import router as tasks_router
from tasks.repository import TaskStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.log_level())
    settings = config.load_settings()

    # One pool per process, shared by every store.
    db = Database(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        command_timeout=settings.db_command_timeout_s,
    )
    await db.connect()
    app.state.db = db

    scheduler = None
    try:
        jobs = []
        if settings.report_enabled:
            report = DailyIncompleteTasksReport(TaskStore(db))
            jobs.append(report.as_job(settings.report_cron))
        scheduler = build_scheduler(jobs, timezone=settings.report_timezone)
        scheduler.start()
        yield
    finally:
        if scheduler is not None and scheduler.running:
            scheduler.shutdown(wait=False)
        await db.close()


app = FastAPI(lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(config.cors_origins()),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(goals_router.router, tags=["goals"])
app.include_router(tasks_router.router, tags=["tasks"])


@app.exception_handler(NotFoundError)
async def not_found_handler(_: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("storage_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=503, content={"detail": "Storage operation failed."})


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "goal-tracker api"}
