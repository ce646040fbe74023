import logging
from typing import Optional

import httpx

from tasktracker.config import TASKS_API_URL
from tasktracker.schemas.task import TaskCreate, TaskOut, TaskUpdate

logger = logging.getLogger(__name__)


class TaskApiClient:
    """Async client for the /tasks REST endpoints.

    Failures (transport errors and non-2xx responses) are logged and re-raised
    as the original httpx exception; nothing is retried.
    """

    def __init__(self, base_url: str = TASKS_API_URL, http: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self._http = http or httpx.AsyncClient(timeout=10.0)

    async def __aenter__(self) -> "TaskApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, action: str, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self._http.request(method, f"{self.base_url}{path}", **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("error %s: %s", action, e)
            raise
        return response

    async def list_tasks(self) -> list[TaskOut]:
        response = await self._request("fetching tasks", "GET", "/tasks")
        return [TaskOut.model_validate(item) for item in response.json()]

    async def get_task(self, task_id: int) -> TaskOut:
        response = await self._request("fetching task", "GET", f"/tasks/{task_id}")
        return TaskOut.model_validate(response.json())

    async def create_task(self, task: TaskCreate) -> TaskOut:
        response = await self._request("creating task", "POST", "/tasks", json=task.model_dump())
        return TaskOut.model_validate(response.json())

    async def update_task(self, task_id: int, task: TaskUpdate) -> None:
        await self._request(
            "updating task", "PUT", f"/tasks/{task_id}", json=task.model_dump(exclude_unset=True)
        )

    async def delete_task(self, task_id: int) -> None:
        await self._request("deleting task", "DELETE", f"/tasks/{task_id}")
