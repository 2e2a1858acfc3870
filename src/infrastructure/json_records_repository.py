"""JSON file backed repository for shop records."""

from collections.abc import Callable, Mapping
import json
from pathlib import Path
from typing import Any, TypeVar

from src.application.ports.records_repository import (
    ShopRecordsRepositoryPort,
)
from src.domain.models import ShopSnapshot
from src.infrastructure.record_mappers import (
    asset_from_mapping,
    expense_from_mapping,
    product_from_mapping,
    purchase_from_mapping,
    sale_from_mapping,
)

T = TypeVar("T")


class JsonRecordsRepository(ShopRecordsRepositoryPort):
    """Repository reading a JSON document of record collections.

    The document holds ``sales``, ``purchases``, ``expenses``, ``assets``,
    and ``products`` arrays. Missing arrays are treated as empty. The file
    is re-read on every snapshot.
    """

    def __init__(self, path: Path | str, logger) -> None:
        """Initialize the repository.

        Args:
            path: Location of the JSON document.
            logger: Logger used for info messages.

        Raises:
            RuntimeError: If the file does not exist.
        """
        self._path = Path(path)
        self._logger = logger
        if not self._path.exists():
            raise RuntimeError(f"Shop data file not found: {self._path}")

    def fetch_snapshot(self) -> ShopSnapshot:
        with self._path.open(encoding="utf-8") as handle:
            document = json.load(handle)
        if not isinstance(document, Mapping):
            raise ValueError(
                f"Shop data file must contain a JSON object: {self._path}"
            )
        snapshot = ShopSnapshot(
            sales=_parse_collection(document, "sales", sale_from_mapping),
            purchases=_parse_collection(
                document,
                "purchases",
                purchase_from_mapping,
            ),
            expenses=_parse_collection(
                document,
                "expenses",
                expense_from_mapping,
            ),
            assets=_parse_collection(document, "assets", asset_from_mapping),
            products=_parse_collection(
                document,
                "products",
                product_from_mapping,
            ),
        )
        self._logger.info(
            f"Loaded {len(snapshot.sales)} sales, "
            f"{len(snapshot.purchases)} purchases, "
            f"{len(snapshot.expenses)} expenses, "
            f"{len(snapshot.assets)} assets, "
            f"{len(snapshot.products)} products from {self._path.name}"
        )
        return snapshot


def _parse_collection(
    document: Mapping[str, Any],
    key: str,
    parser: Callable[[Mapping[str, Any]], T],
) -> tuple[T, ...]:
    records = []
    for index, raw in enumerate(document.get(key) or ()):
        try:
            records.append(parser(raw))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(
                f"Invalid record in '{key}' at index {index}: {exc}"
            ) from exc
    return tuple(records)


__all__ = ["JsonRecordsRepository"]
