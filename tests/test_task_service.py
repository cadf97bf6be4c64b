# tests/test_task_service.py

from datetime import date

import pytest

from errors import NotFound, ValidationError
from services.tasks import TaskService

OWNER = 1
OTHER = 2


def test_list_only_returns_owned_tasks(task_service: TaskService) -> None:
    for i in range(3):
        task_service.create(OWNER, f"mine {i}")
    for i in range(2):
        task_service.create(OTHER, f"theirs {i}")

    tasks = task_service.list(OWNER)
    assert len(tasks) == 3
    assert all(t.owner_id == OWNER for t in tasks)
    assert [t.title for t in tasks] == ["mine 0", "mine 1", "mine 2"]

    assert task_service.list(99) == []


def test_list_filters_by_completion(task_service: TaskService) -> None:
    task_service.create(OWNER, "open")
    task_service.create(OWNER, "done", status=True)

    assert [t.title for t in task_service.list(OWNER, completed=True)] == ["done"]
    assert [t.title for t in task_service.list(OWNER, completed=False)] == ["open"]


def test_create_defaults_and_strips(task_service: TaskService) -> None:
    task = task_service.create(OWNER, "  Test Task  ", description="  details ", due_date=date(2024, 12, 31))

    assert task.id is not None
    assert task.title == "Test Task"
    assert task.description == "details"
    assert task.status is False
    assert task.due_date == date(2024, 12, 31)


@pytest.mark.parametrize("title", [None, "", "   "])
def test_create_requires_title(task_service: TaskService, title) -> None:
    with pytest.raises(ValidationError):
        task_service.create(OWNER, title)
    assert task_service.list(OWNER) == []


def test_update_changes_only_supplied_fields(task_service: TaskService) -> None:
    task = task_service.create(OWNER, "Original", description="keep me", due_date=date(2024, 12, 31))
    created_at = task.created_at

    updated = task_service.update(task.id, {"title": "X"})

    assert updated.title == "X"
    assert updated.description == "keep me"
    assert updated.status is False
    assert updated.due_date == date(2024, 12, 31)
    assert updated.owner_id == OWNER
    assert updated.created_at == created_at
    assert updated.updated_at >= created_at


def test_update_explicit_null_clears_optional_fields(task_service: TaskService) -> None:
    task = task_service.create(OWNER, "T", description="desc", due_date=date(2024, 12, 31))

    updated = task_service.update(task.id, {"description": None, "due_date": None, "status": True})

    assert updated.description is None
    assert updated.due_date is None
    assert updated.status is True
    assert updated.title == "T"


@pytest.mark.parametrize("fields", [{"title": None}, {"title": " "}, {"status": None}])
def test_update_rejects_invalid_values(task_service: TaskService, fields) -> None:
    task = task_service.create(OWNER, "T")

    with pytest.raises(ValidationError):
        task_service.update(task.id, fields)


def test_update_ignores_unknown_and_owner_fields(task_service: TaskService) -> None:
    task = task_service.create(OWNER, "T")

    updated = task_service.update(task.id, {"owner_id": OTHER, "id": 500, "colour": "red"})

    assert updated.owner_id == OWNER
    assert updated.id == task.id


def test_update_missing_task(task_service: TaskService) -> None:
    with pytest.raises(NotFound):
        task_service.update(12345, {"title": "X"})


def test_update_and_delete_respect_owner(task_service: TaskService) -> None:
    task = task_service.create(OWNER, "T")

    with pytest.raises(NotFound):
        task_service.update(task.id, {"title": "hijacked"}, owner_id=OTHER)
    with pytest.raises(NotFound):
        task_service.delete(task.id, owner_id=OTHER)

    assert task_service.get(task.id).title == "T"


def test_delete_twice(task_service: TaskService) -> None:
    task_id = task_service.create(OWNER, "T").id
    task_service.create(OWNER, "stays")

    task_service.delete(task_id)
    assert [t.title for t in task_service.list(OWNER)] == ["stays"]

    with pytest.raises(NotFound) as info:
        task_service.delete(task_id)
    assert info.value.status_code == 404


def test_out_of_range_id_is_not_found(task_service: TaskService) -> None:
    with pytest.raises(NotFound):
        task_service.get(2 ** 64)
