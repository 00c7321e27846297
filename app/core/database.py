# app/core/database.py

from contextlib import contextmanager
from typing import Iterator
import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, create_engine

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str) -> Engine:
    """Create the process-wide database engine (and its connection pool)."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False  # Needed for SQLite

    return create_engine(
        database_url,
        echo=False,  # Set to True to see SQL queries
        connect_args=connect_args,
    )


def init_db(engine: Engine) -> None:
    """Create all tables and make sure the database answers."""
    # Import so the table is registered on the metadata
    from app import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    logger.info("Database linked")


@contextmanager
def get_session(engine: Engine) -> Iterator[Session]:
    """Get database session."""
    with Session(engine) as session:
        yield session
