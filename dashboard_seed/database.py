"""Database configuration and connection pooling for the dashboard seed service.

Exports:
- Base: declarative base for models
- engine: SQLAlchemy engine (owns the connection pool)
- build_engine(url): engine factory used by the app and the CLI script
- get_engine: FastAPI dependency returning the shared engine
- check_connection(engine): startup probe, logs the result

Behavior:
- Reads DATABASE_URL from env, falls back to a local SQLite file `dashboard.db` in the project root.
- PostgreSQL connections are encrypted with `sslmode=require` by default, which
  does not verify the server certificate. Override with DATABASE_SSLMODE.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from sqlalchemy import create_engine, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

# Project root (two levels up from this file)
PROJECT_ROOT = Path(__file__).resolve().parents[1]

DATABASE_SSLMODE = os.getenv("DATABASE_SSLMODE", "require")
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "10"))


def _default_sqlite_url() -> str:
    db_path = PROJECT_ROOT / "dashboard.db"
    return f"sqlite:///{db_path.as_posix()}"


def normalize_database_url(url: str) -> str:
    # Hosted Postgres providers hand out `postgres://` URLs, which SQLAlchemy rejects
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


def engine_options(url: str) -> Dict[str, Any]:
    """Return `create_engine` keyword arguments appropriate for `url`."""
    options: Dict[str, Any] = {"future": True, "pool_pre_ping": True}
    if url.startswith("sqlite"):
        # SQLite requires `check_same_thread=False` when used from uvicorn worker threads
        options["connect_args"] = {"check_same_thread": False}
    elif url.startswith("postgresql"):
        options["connect_args"] = {"sslmode": DATABASE_SSLMODE}
        options["pool_size"] = DB_POOL_SIZE
        options["max_overflow"] = DB_MAX_OVERFLOW
    return options


def build_engine(url: Optional[str] = None) -> Engine:
    url = normalize_database_url(url or DATABASE_URL)
    return create_engine(url, **engine_options(url))


DATABASE_URL: str = normalize_database_url(os.getenv("DATABASE_URL", _default_sqlite_url()))

engine = build_engine(DATABASE_URL)

# Declarative base for models
Base = declarative_base()


def get_engine() -> Engine:
    """Return the pooled engine for FastAPI dependencies.

    Usage:
        def endpoint(engine: Engine = Depends(get_engine)):
            ...
    """
    return engine


def check_connection(target: Optional[Engine] = None) -> bool:
    """Run a trivial query to confirm the database is reachable.

    Failures are logged and reported as False, never raised.
    """
    target = target or engine
    try:
        with target.connect() as conn:
            now = conn.execute(select(func.current_timestamp())).scalar()
        logger.info("Database connection successful: %s", now)
        return True
    except SQLAlchemyError as exc:
        logger.error("Database connection error: %s", exc)
        return False


__all__ = [
    "Base",
    "engine",
    "build_engine",
    "engine_options",
    "normalize_database_url",
    "get_engine",
    "check_connection",
    "DATABASE_URL",
]
