# tests/test_models.py

from datetime import date, timedelta

from sqlmodel import Session

from models import SessionRecord, Task, utcnow


def test_session_record_round_trip(engine) -> None:
    created = utcnow()
    with Session(engine) as db:
        db.add(SessionRecord(token="tok", user_id=1, username="u1", email="u1@x.com",
                             created_at=created, expires_at=created + timedelta(hours=24)))
        db.commit()

    with Session(engine) as db:
        record = db.get(SessionRecord, "tok")

    assert record.created_at == created
    assert record.expires_at == created + timedelta(hours=24)
    assert record.expires_at.tzinfo is None
    assert record.expires_at > utcnow()


def test_task_round_trip(engine) -> None:
    with Session(engine) as db:
        task = Task(owner_id=1, title="T", due_date=date(2024, 12, 31))
        db.add(task)
        db.commit()
        db.refresh(task)
        task_id, created_at = task.id, task.created_at

    with Session(engine) as db:
        stored = db.get(Task, task_id)

    assert stored.title == "T"
    assert stored.status is False
    assert stored.due_date == date(2024, 12, 31)
    assert stored.created_at == created_at
    assert stored.updated_at.tzinfo is None
