import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from errors import StoreError
from models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Thin persistence wrapper for Task rows"""

    def __init__(self, db: Session):
        self.db = db

    def get(self, task_id: int) -> Optional[Task]:
        try:
            return self.db.get(Task, task_id)
        except OverflowError:
            # Ids outside the INTEGER range cannot exist
            return None
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    def list_for_owner(self, owner_id: int, completed: Optional[bool] = None) -> List[Task]:
        query = select(Task).where(Task.owner_id == owner_id)

        if completed is not None:
            query = query.where(Task.status == completed)

        query = query.order_by(Task.created_at, Task.id)

        try:
            return list(self.db.exec(query).all())
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    def save(self, task: Task) -> Task:
        try:
            self.db.add(task)
            self.db.commit()
            self.db.refresh(task)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to save task id=%s", task.id)
            raise StoreError(str(exc)) from exc
        return task

    def delete(self, task: Task) -> None:
        try:
            self.db.delete(task)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to delete task id=%s", task.id)
            raise StoreError(str(exc)) from exc
