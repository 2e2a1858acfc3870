"""Database ports for the shop reports.

This module defines the application-layer protocol for accessing the shop
database engine. Infrastructure implementations provide concrete adapters
that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine holding shop records."""

    def get_shop_engine(self) -> Engine:
        """Get the engine for the shop database.

        Returns:
            Engine: SQLAlchemy engine connected to the shop records.
        """


__all__ = ["DatabaseEnginePort"]
