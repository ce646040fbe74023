import logging

import httpx
import pytest
from httpx import ASGITransport

from tasktracker.client.task_api import TaskApiClient
from tasktracker.main import create_app
from tasktracker.models.status import TaskStatus
from tasktracker.schemas.task import TaskCreate, TaskUpdate


def _api_client(database) -> TaskApiClient:
    # ASGITransport skips the lifespan, so open the store by hand
    database.open()
    http = httpx.AsyncClient(transport=ASGITransport(app=create_app(database)), base_url="http://test")
    return TaskApiClient("http://test/api/", http=http)


@pytest.mark.asyncio
async def test_round_trip_through_api(database):
    async with _api_client(database) as api:
        assert await api.list_tasks() == []

        created = await api.create_task(
            TaskCreate(title="Buy milk", description="2%", status="pending")
        )
        assert created.id > 0
        assert created.status is TaskStatus.PENDING

        await api.update_task(created.id, TaskUpdate(status="completed"))
        fetched = await api.get_task(created.id)
        assert fetched.status is TaskStatus.COMPLETED
        assert fetched.title == "Buy milk"
        assert fetched.created_at == created.created_at

        tasks = await api.list_tasks()
        assert [t.id for t in tasks] == [created.id]

        await api.delete_task(created.id)
        assert await api.list_tasks() == []


@pytest.mark.asyncio
async def test_error_responses_are_logged_and_reraised(database, caplog):
    caplog.set_level(logging.ERROR, logger="tasktracker.client.task_api")
    async with _api_client(database) as api:
        with pytest.raises(httpx.HTTPStatusError) as excinfo:
            await api.get_task(12345)
        assert excinfo.value.response.status_code == 404
        assert "fetching task" in caplog.text

        with pytest.raises(httpx.HTTPStatusError) as excinfo:
            await api.create_task(TaskCreate(title="x", description="y", status="archived"))
        assert excinfo.value.response.status_code == 400
        assert "creating task" in caplog.text


@pytest.mark.asyncio
async def test_transport_errors_are_reraised(caplog):
    def unreachable(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(unreachable))
    async with TaskApiClient("http://backend/api", http=http) as api:
        with pytest.raises(httpx.ConnectError):
            await api.list_tasks()
        with pytest.raises(httpx.ConnectError):
            await api.delete_task(1)
    assert "deleting task" in caplog.text
