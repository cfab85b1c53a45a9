"""Database engine creation and schema setup."""

from __future__ import annotations

from loguru import logger
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, create_engine

from catalog.domain.exceptions import StoreUnavailableError

# Registers ProductTable with SQLModel.metadata.
from catalog.infrastructure.persistence import tables  # noqa: F401


def build_engine(database_url: str) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # FastAPI serves sync routes from a threadpool.
        connect_args["check_same_thread"] = False

    logger.info("Initializing database engine for {}", database_url.split("://", 1)[0])
    return create_engine(database_url, connect_args=connect_args, pool_pre_ping=True)


def init_db(engine: Engine) -> None:
    """Create missing tables. Existing tables are left as they are."""
    logger.info("Creating database schema")
    try:
        SQLModel.metadata.create_all(engine)
    except SQLAlchemyError as exc:
        logger.exception("Could not create database schema")
        raise StoreUnavailableError("init_db") from exc
