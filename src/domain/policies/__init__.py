"""Domain policies package."""

from .calendar import is_sale_on_day, local_day
from .stock import is_low_stock, is_out_of_stock, resolve_stock_threshold

__all__ = [
    "is_sale_on_day",
    "local_day",
    "is_low_stock",
    "is_out_of_stock",
    "resolve_stock_threshold",
]
