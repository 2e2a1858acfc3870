"""Application port for shop record providers."""

from typing import Protocol

from src.domain.models import ShopSnapshot


class ShopRecordsRepositoryPort(Protocol):
    """Port exposing read access to the shop record collections.

    Implementations return a fresh immutable snapshot on every call so
    reports always reflect the current records.
    """

    def fetch_snapshot(self) -> ShopSnapshot:
        """Return sales, purchases, expenses, assets, and products."""


__all__ = ["ShopRecordsRepositoryPort"]
