"""SQLAlchemy engine for the shop records database.

The engine is created lazily from ``SHOP_DB_URL`` and shared by every
repository in the process. Server databases get a small pre-pinged pool;
SQLite files, the usual choice for a single shop, keep SQLAlchemy's own
pool and may be used from Streamlit's worker threads.
"""

import os
from typing import Any, Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

POOL_SIZE = 5
MAX_OVERFLOW = 5


def _get_env_var(name: str) -> str:
    """Return a required environment variable, loading .env first.

    Raises:
        RuntimeError: If the variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _engine_options(db_url: str) -> dict[str, Any]:
    """Return create_engine keyword arguments suited to the database URL.

    Args:
        db_url: SQLAlchemy database URL.

    Returns:
        dict: Pool and connection options.
    """
    if make_url(db_url).get_backend_name() == "sqlite":
        return {
            "connect_args": {"check_same_thread": False},
            "future": True,
        }
    return {
        "poolclass": QueuePool,
        "pool_size": POOL_SIZE,
        "max_overflow": MAX_OVERFLOW,
        "pool_pre_ping": True,
        "future": True,
    }


def _create_engine(db_url: str) -> Engine:
    return create_engine(db_url, **_engine_options(db_url))


_shop_engine: Optional[Engine] = None


def get_shop_engine() -> Engine:
    """Return the process-wide engine for the shop records."""
    global _shop_engine
    if _shop_engine is None:
        _shop_engine = _create_engine(_get_env_var("SHOP_DB_URL"))
    return _shop_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort backed by the shared shop engine."""

    def get_shop_engine(self) -> Engine:
        return get_shop_engine()


__all__ = [
    "get_shop_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
