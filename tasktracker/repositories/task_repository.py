import logging
from typing import Optional

from sqlalchemy.orm import Session

from tasktracker.models.status import TaskStatus
from tasktracker.models.task import Task

logger = logging.getLogger(__name__)


class TaskRepository:
    """Data access for the tasks table; every method is one store round-trip."""

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[Task]:
        return self.db.query(Task).order_by(Task.id).all()

    def get_by_id(self, task_id: int) -> Optional[Task]:
        return self.db.query(Task).filter(Task.id == task_id).first()

    def create(self, title: str, description: str, status: TaskStatus) -> Task:
        new = Task(title=title, description=description, status=status)
        self.db.add(new)
        self.db.commit()
        self.db.refresh(new)
        logger.debug("created task id=%s status=%s", new.id, new.status.value)
        return new

    def update(self, task_id: int, fields: dict) -> None:
        """Apply a partial update; silently does nothing when no row matches."""
        if not fields:
            return
        count = (
            self.db.query(Task)
            .filter(Task.id == task_id)
            .update(fields, synchronize_session=False)
        )
        self.db.commit()
        logger.debug("updated task id=%s fields=%s rows=%s", task_id, sorted(fields), count)

    def delete(self, task_id: int) -> None:
        count = self.db.query(Task).filter(Task.id == task_id).delete(synchronize_session=False)
        self.db.commit()
        logger.debug("deleted task id=%s rows=%s", task_id, count)
