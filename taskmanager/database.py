# taskmanager/database.py
"""Database engine, table creation, and per-request sessions using SQLModel."""

import logging

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

# Registers the table models on SQLModel.metadata.
from taskmanager import models  # noqa: F401

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for the configured connection string."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, connect_args=connect_args)


def create_db_and_tables(engine: Engine) -> None:
    """Create all tables from SQLModel metadata."""
    logger.info("Creating tables on %s", engine.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(engine)


def get_session(request: Request):
    """Yield a database session for FastAPI dependency injection."""
    with Session(request.app.state.engine) as session:
        yield session
