"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.records_repository import (
    ShopRecordsRepositoryPort,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.json_records_repository import JsonRecordsRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.memory_store import InMemoryShopStore
from src.infrastructure.settings import ShopSettings
from src.infrastructure.sql_records_repository import (
    SqlAlchemyRecordsRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_records_repository(
    settings: ShopSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> ShopRecordsRepositoryPort:
    """Return the configured shop records repository.

    The memory backend is seeded from the data file when one is
    configured, so later edits to the file do not reach it.

    Raises:
        RuntimeError: If the json backend has no data file configured, or the
            configured data file does not exist.
    """
    resolved = settings or ShopSettings.from_env()
    if resolved.backend == "sql":
        return SqlAlchemyRecordsRepository(
            db_port or build_database_adapter(),
            logger=get_app_logger(),
        )
    if resolved.backend == "memory":
        return _build_memory_store(resolved)
    if resolved.data_file is None:
        raise RuntimeError("JSON backend requires a SHOP_DATA_FILE value.")
    return JsonRecordsRepository(resolved.data_file, logger=get_app_logger())


def _build_memory_store(settings: ShopSettings) -> InMemoryShopStore:
    """Return an in-memory store seeded once from the data file, if any."""
    logger = get_app_logger()
    if settings.data_file is None:
        logger.warning("Memory backend has no SHOP_DATA_FILE; starting empty.")
        return InMemoryShopStore()
    snapshot = JsonRecordsRepository(
        settings.data_file,
        logger=logger,
    ).fetch_snapshot()
    return InMemoryShopStore(snapshot)


__all__ = [
    "build_database_adapter",
    "build_records_repository",
]
