"""Calendar-day policies for sales."""

from datetime import date, datetime

from src.domain.models import SaleRecord


def local_day(moment: datetime) -> date:
    """Return the local calendar day of a timestamp.

    Aware timestamps are converted to the local timezone first. Naive
    timestamps are taken as already local.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.date()


def is_sale_on_day(sale: SaleRecord, day: date) -> bool:
    """Return True when the sale happened on the given local calendar day.

    This compares calendar days, not a rolling 24 hour window: a sale at
    23:59 yesterday is never part of today.
    """
    return local_day(sale.date) == day


__all__ = ["local_day", "is_sale_on_day"]
