"""
Filter engine for booking collections.

``apply_filters`` is pure and order-preserving: it returns the records
of the input, in input order, for which every active criterion matches.
An empty criterion (``None`` or ``""``) matches everything.
"""

import dataclasses
import datetime as dt
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from autoservice.schemas.booking_schema import BookingRecord, BookingStatus
from autoservice.utils import parse_calendar_date

FILTER_FIELDS = ("customer_name", "status", "service", "date")


@dataclass(frozen=True)
class FilterCriteria:
    """User constraints narrowing the shown bookings.

    customer_name and service match as case-insensitive substrings,
    status and date match exactly.
    """
    customer_name: Optional[str] = None
    status: Optional[Union[str, BookingStatus]] = None
    service: Optional[str] = None
    date: Optional[Union[str, dt.date]] = None

    def __post_init__(self) -> None:
        # Frozen, so normalize through object.__setattr__.
        object.__setattr__(self, "date", parse_calendar_date(self.date))
        if isinstance(self.status, BookingStatus):
            object.__setattr__(self, "status", self.status.value)

    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name in FILTER_FIELDS)

    def replace(self, name: str, value: object) -> "FilterCriteria":
        """Return a copy with one criterion changed.

        Raises:
            ValueError: If ``name`` is not a filter field.
        """
        if name not in FILTER_FIELDS:
            raise ValueError(f"Unknown filter: {name}. Valid filters: {list(FILTER_FIELDS)}")
        return dataclasses.replace(self, **{name: value or None})


def _contains(haystack: Optional[str], needle: str) -> bool:
    return haystack is not None and needle.lower() in haystack.lower()


def matches(record: BookingRecord, criteria: FilterCriteria) -> bool:
    """True iff the record satisfies every non-empty criterion."""
    if criteria.customer_name and not _contains(record.customer_name, criteria.customer_name):
        return False
    if criteria.status and record.status != criteria.status:
        return False
    if criteria.service and not _contains(record.service, criteria.service):
        return False
    if criteria.date and record.date != criteria.date:
        return False
    return True


def apply_filters(
    records: Iterable[BookingRecord], criteria: FilterCriteria
) -> list[BookingRecord]:
    """Return the matching subset, preserving source order."""
    return [record for record in records if matches(record, criteria)]
