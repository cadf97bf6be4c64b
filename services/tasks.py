"""Task management service."""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from errors import TaskNotFound, ValidationError
from models import Task, utcnow
from stores.tasks import TaskStore

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "status", "due_date")


def _clean_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        raise ValidationError("Title is required")
    return title.strip()


def _clean_description(description: Optional[str]) -> Optional[str]:
    return description.strip() if description else None


class TaskService:
    def __init__(self, store: TaskStore):
        self.store = store

    def list(self, owner_id: int, completed: Optional[bool] = None) -> List[Task]:
        """All tasks owned by owner_id, optionally only (in)complete ones."""
        return self.store.list_for_owner(owner_id, completed=completed)

    def get(self, task_id: int, owner_id: Optional[int] = None) -> Task:
        """
        Look up a task by id.

        When owner_id is given, a task belonging to anyone else is reported
        as missing.
        """
        task = self.store.get(task_id)
        if task is None or (owner_id is not None and task.owner_id != owner_id):
            raise TaskNotFound()
        return task

    def create(
        self,
        owner_id: int,
        title: Optional[str],
        description: Optional[str] = None,
        status: bool = False,
        due_date: Optional[date] = None,
    ) -> Task:
        task = Task(
            owner_id=owner_id,
            title=_clean_title(title),
            description=_clean_description(description),
            status=bool(status),
            due_date=due_date,
        )
        self.store.save(task)
        logger.info("Task id=%s created for owner id=%s", task.id, owner_id)
        return task

    def update(self, task_id: int, fields: Dict[str, Any], owner_id: Optional[int] = None) -> Task:
        """
        Apply a partial update.

        Only keys present in fields are touched; a key mapped to None clears
        description or due_date, but is rejected for title and status.
        """
        task = self.get(task_id, owner_id=owner_id)

        changes = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}

        if "title" in changes:
            changes["title"] = _clean_title(changes["title"])
        if "description" in changes:
            changes["description"] = _clean_description(changes["description"])
        if "status" in changes and changes["status"] is None:
            raise ValidationError("Status must be true or false")

        for key, value in changes.items():
            setattr(task, key, value)
        task.updated_at = utcnow()

        self.store.save(task)
        logger.info("Task id=%s updated fields=%s", task.id, sorted(changes))
        return task

    def delete(self, task_id: int, owner_id: Optional[int] = None) -> None:
        task = self.get(task_id, owner_id=owner_id)
        self.store.delete(task)
        logger.info("Task id=%s deleted", task_id)
