"""Database engine and session setup."""

from __future__ import annotations

import logging
import os
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from minisoccer.models import Base, User

logger = logging.getLogger(__name__)


class DatabaseConfigError(RuntimeError):
    """Raised when the database cannot be configured or reached."""


def init_database(dsn: Optional[str] = None, auto_migrate: Optional[bool] = None) -> sessionmaker:
    """Connect and return a session factory; defaults come from ``DB_URL`` and ``AUTO_MIGRATE``."""
    dsn = os.environ.get("DB_URL", "") if dsn is None else dsn
    if not dsn:
        raise DatabaseConfigError("DB_URL is not set in .env")
    if auto_migrate is None:
        auto_migrate = os.environ.get("AUTO_MIGRATE") == "true"
    if dsn.startswith("postgres://"):
        dsn = "postgresql://" + dsn[len("postgres://"):]

    try:
        url = make_url(dsn)
        pool = {}
        if url.get_backend_name() != "sqlite":
            pool = {"pool_size": 10, "max_overflow": 90, "pool_recycle": 3600}
        engine = create_engine(url, **pool)
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        if auto_migrate:
            Base.metadata.create_all(engine, tables=[User.__table__])
    except (SQLAlchemyError, ImportError) as exc:
        raise DatabaseConfigError(f"Failed to connect to database: {exc}") from exc

    logger.info("Database connection established.")
    return sessionmaker(bind=engine, expire_on_commit=False)