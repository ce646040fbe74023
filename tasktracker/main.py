import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from tasktracker.config import DATABASE_URL, LOG_LEVEL
from tasktracker.database import Database
from tasktracker.logging_setup import setup_logging
from tasktracker.routers import tasks

logger = logging.getLogger(__name__)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the REST backend around an explicitly owned store handle."""
    database = database or Database(DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.open()
        try:
            yield
        finally:
            database.close()

    app = FastAPI(title="Task Tracker API", lifespan=lifespan)
    app.state.database = database

    app.include_router(tasks.router)

    # Store failures collapse into one generic error; details stay in the log
    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("store failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    # Anything else the handlers did not expect gets the same body
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.error("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    return app


def build_app() -> FastAPI:
    setup_logging(LOG_LEVEL)
    return create_app()


# uvicorn --factory tasktracker.main:build_app
