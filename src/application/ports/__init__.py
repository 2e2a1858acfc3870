"""Application ports package."""

from .database import DatabaseEnginePort
from .records_repository import ShopRecordsRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "ShopRecordsRepositoryPort",
]
