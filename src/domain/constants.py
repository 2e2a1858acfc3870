"""Domain constants for shop reporting."""

DEFAULT_LOW_STOCK_THRESHOLD = 10

MONTHS_PER_YEAR = 12

ASSET_CONDITIONS = (
    "excellent",
    "good",
    "fair",
    "poor",
)

PAYMENT_METHODS = (
    "Cash",
    "Card",
    "Mobile Payment",
)


__all__ = [
    "DEFAULT_LOW_STOCK_THRESHOLD",
    "MONTHS_PER_YEAR",
    "ASSET_CONDITIONS",
    "PAYMENT_METHODS",
]
