import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Form
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from tasktracker.client.task_api import TaskApiClient
from tasktracker.config import LOG_LEVEL, TASKS_API_URL
from tasktracker.logging_setup import setup_logging
from tasktracker.schemas.task import TaskCreate, TaskUpdate
from tasktracker.ui.views import (
    render_list_error,
    render_not_found,
    render_task_form,
    render_task_list,
)

logger = logging.getLogger(__name__)


def _error_status(exc: httpx.HTTPError) -> int:
    # Backend answered with an error: pass its code through. Otherwise it was unreachable.
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code
    return 502


def _validation_message(exc: ValidationError) -> str:
    return "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in exc.errors())


def create_ui_app(client: Optional[TaskApiClient] = None) -> FastAPI:
    """Frontend app: list and form views rendered from the REST API."""
    client = client or TaskApiClient(TASKS_API_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(title="Task Tracker", lifespan=lifespan)

    @app.get("/", response_class=HTMLResponse)
    async def task_list():
        try:
            tasks = await client.list_tasks()
        except httpx.HTTPError:
            return HTMLResponse(render_list_error(), status_code=502)
        return render_task_list(tasks)

    @app.get("/task/new", response_class=HTMLResponse)
    async def new_task_form():
        return render_task_form()

    @app.post("/task/new", response_class=HTMLResponse)
    async def submit_new_task(
        title: str = Form(""), description: str = Form(""), status: str = Form("pending")
    ):
        values = {"title": title, "description": description, "status": status}
        try:
            await client.create_task(TaskCreate(**values))
        except ValidationError as e:
            return HTMLResponse(render_task_form(error=_validation_message(e), **values), status_code=422)
        except httpx.HTTPError as e:
            return HTMLResponse(
                render_task_form(error="Could not save the task.", **values),
                status_code=_error_status(e),
            )
        # The form stays on screen with what was submitted
        return render_task_form(notice="Task created.", **values)

    @app.get("/task/{task_id}/edit", response_class=HTMLResponse)
    async def edit_task_form(task_id: int):
        try:
            task = await client.get_task(task_id)
        except httpx.HTTPError as e:
            code = _error_status(e)
            if code == 404:
                return HTMLResponse(render_not_found(), status_code=404)
            return HTMLResponse(render_not_found("Could not load the task."), status_code=code)
        return render_task_form(task.id, task.title, task.description, task.status.value)

    @app.post("/task/{task_id}/edit", response_class=HTMLResponse)
    async def submit_task_edit(
        task_id: int,
        title: str = Form(""),
        description: str = Form(""),
        status: str = Form("pending"),
    ):
        values = {"title": title, "description": description, "status": status}
        try:
            await client.update_task(task_id, TaskUpdate(**values))
        except ValidationError as e:
            return HTMLResponse(
                render_task_form(task_id, error=_validation_message(e), **values), status_code=422
            )
        except httpx.HTTPError as e:
            return HTMLResponse(
                render_task_form(task_id, error="Could not save the task.", **values),
                status_code=_error_status(e),
            )
        return render_task_form(task_id, notice="Task updated.", **values)

    @app.post("/task/{task_id}/delete")
    async def delete_task(task_id: int):
        try:
            await client.delete_task(task_id)
        except httpx.HTTPError:
            return HTMLResponse(render_list_error(), status_code=502)
        return RedirectResponse("/", status_code=303)

    return app


def build_ui_app() -> FastAPI:
    setup_logging(LOG_LEVEL)
    return create_ui_app()
