from typing import Optional

from tasktracker.models.status import TaskStatus
from tasktracker.models.task import Task
from tasktracker.repositories.task_repository import TaskRepository


class TaskService:
    """Seam between the HTTP layer and the repository.

    Currently delegates one-to-one; business rules belong here.
    """

    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def list_tasks(self) -> list[Task]:
        return self.repository.list_all()

    def get_task(self, task_id: int) -> Optional[Task]:
        return self.repository.get_by_id(task_id)

    def create_task(self, title: str, description: str, status: TaskStatus) -> Task:
        return self.repository.create(title, description, status)

    def update_task(self, task_id: int, fields: dict) -> None:
        self.repository.update(task_id, fields)

    def delete_task(self, task_id: int) -> None:
        self.repository.delete(task_id)
