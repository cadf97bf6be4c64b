import logging
from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import create_engine, SQLModel, Session

# Table classes must be imported so they register on SQLModel.metadata
import models  # noqa: F401

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create the SQLAlchemy engine for the configured database

    Args:
        database_url: SQLAlchemy URL
        echo: Log every SQL statement

    Returns:
        Engine bound to database_url
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        # FastAPI runs sync endpoints in a threadpool
        connect_args["check_same_thread"] = False

    return create_engine(database_url, echo=echo, connect_args=connect_args)


def create_db_and_tables(engine: Engine) -> None:
    """Create all tables in the database"""
    SQLModel.metadata.create_all(engine)
    logger.info("Database tables ready on %s", engine.url.render_as_string(hide_password=True))


def get_session(request: Request):
    """Get database session - used as FastAPI dependency"""
    with Session(request.app.state.engine) as session:
        yield session
