import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from tasktracker.database import get_db
from tasktracker.models.status import InvalidStatusError, TaskStatus
from tasktracker.repositories.task_repository import TaskRepository
from tasktracker.schemas.task import Message, TaskCreate, TaskOut, TaskUpdate
from tasktracker.services.task_service import TaskService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(TaskRepository(db))


def _parse_status(value: Optional[str]) -> TaskStatus:
    try:
        return TaskStatus.parse(value)
    except InvalidStatusError as e:
        logger.info("rejected status value %r", value)
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=list[TaskOut])
def list_tasks(service: TaskService = Depends(get_task_service)):
    return service.list_tasks()


@router.get("/{task_id}", response_model=TaskOut)
def get_task(task_id: int, service: TaskService = Depends(get_task_service)):
    task = service.get_task(task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.post("", response_model=TaskOut, status_code=201)
def create_task(task: TaskCreate, service: TaskService = Depends(get_task_service)):
    status = _parse_status(task.status)
    return service.create_task(task.title, task.description, status)


@router.put("/{task_id}", response_model=Message)
def update_task(task_id: int, task: TaskUpdate, service: TaskService = Depends(get_task_service)):
    fields = task.changes()
    # status is only checked when the caller sent one
    if "status" in fields:
        fields["status"] = _parse_status(fields["status"])
    service.update_task(task_id, fields)
    return {"message": "Task updated"}


@router.delete("/{task_id}", response_model=Message)
def delete_task(task_id: int, service: TaskService = Depends(get_task_service)):
    service.delete_task(task_id)
    return {"message": "Task deleted"}
