from __future__ import annotations
from datetime import date, datetime
from typing import Optional
from ..models.schema import ClassificationRecord


def reference_day(reference: date | datetime | None = None) -> date:
    if reference is None:
        return date.today()
    if isinstance(reference, datetime):
        return reference.date()
    return reference


def is_valid(record: ClassificationRecord, reference: date | datetime | None = None) -> bool:
    """Return ``True`` when ``reference`` lies inside the record's effective interval.

    Both bounds are inclusive. A bound that is missing or cannot be parsed
    puts no constraint on that side, so a record without dates is always
    valid. An end date before the start date is evaluated as given.
    """
    day = reference_day(reference)
    start: Optional[date] = record.effective_from
    end: Optional[date] = record.effective_to
    if start is not None and day < start:
        return False
    if end is not None and day > end:
        return False
    return True
