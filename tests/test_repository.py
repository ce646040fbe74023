import pytest
from sqlalchemy.exc import IntegrityError, StatementError
from sqlalchemy.orm import Session

from tasktracker.models.status import InvalidStatusError, TaskStatus
from tasktracker.models.task import Task
from tasktracker.repositories.task_repository import TaskRepository
from tasktracker.services.task_service import TaskService


def test_create_and_get(session: Session):
    repo = TaskRepository(session)
    task = repo.create("Buy milk", "2%", TaskStatus.PENDING)
    assert task.id > 0
    assert task.created_at is not None

    found = repo.get_by_id(task.id)
    assert found.title == "Buy milk"
    assert found.status is TaskStatus.PENDING
    assert repo.get_by_id(task.id + 1) is None


def test_list_all_is_ordered_by_id(session: Session):
    repo = TaskRepository(session)
    assert repo.list_all() == []
    a = repo.create("a", "", TaskStatus.PENDING)
    b = repo.create("b", "", TaskStatus.COMPLETED)
    assert [t.id for t in repo.list_all()] == [a.id, b.id]


def test_partial_update_keeps_other_fields(session: Session):
    repo = TaskRepository(session)
    task = repo.create("title", "desc", TaskStatus.PENDING)
    repo.update(task.id, {"status": TaskStatus.IN_PROGRESS})
    session.expire_all()

    updated = repo.get_by_id(task.id)
    assert updated.status is TaskStatus.IN_PROGRESS
    assert updated.title == "title"
    assert updated.description == "desc"


def test_update_and_delete_missing_rows_are_no_ops(session: Session):
    repo = TaskRepository(session)
    repo.update(42, {"title": "nothing"})
    repo.update(42, {})
    repo.delete(42)
    assert repo.list_all() == []


def test_delete_removes_row(session: Session):
    repo = TaskRepository(session)
    task_id = repo.create("gone", "soon", TaskStatus.PENDING).id
    repo.delete(task_id)
    assert repo.get_by_id(task_id) is None
    assert session.query(Task).count() == 0


def test_store_rejects_unknown_status(session: Session):
    session.add(Task(title="x", description="y", status="archived"))
    with pytest.raises((StatementError, IntegrityError)):
        session.flush()
    session.rollback()


def test_service_delegates_to_repository(session: Session):
    service = TaskService(TaskRepository(session))
    task = service.create_task("via service", "d", TaskStatus.COMPLETED)
    assert service.get_task(task.id).title == "via service"
    service.update_task(task.id, {"title": "renamed"})
    session.expire_all()
    assert [t.title for t in service.list_tasks()] == ["renamed"]
    service.delete_task(task.id)
    assert service.list_tasks() == []


def test_status_parse():
    assert TaskStatus.parse("in-progress") is TaskStatus.IN_PROGRESS
    assert TaskStatus.IN_PROGRESS.label == "In progress"
    with pytest.raises(InvalidStatusError, match="Invalid status value"):
        TaskStatus.parse("archived")
    with pytest.raises(InvalidStatusError):
        TaskStatus.parse(None)
