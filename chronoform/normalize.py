"""Normalization of every typed time point form onto a common representation.

Two targets exist: the canonical instant (a ``Timestamp``) and the local
calendar date-time (a naive ``datetime``). Strings are not handled here; they
need a (locale, pattern) pair and are parsed by the converter first.

Absent values (``None`` and the raw counter ``0``) normalize to ``None``.
"""

from datetime import date, datetime, time

from chronoform.epoch import normalize_counter, timestamp_of, to_local
from chronoform.errors import UnsupportedTypeError
from chronoform.instant import LegacyDate, TimePoint, Timestamp

ACCEPTED = "int (epoch millis or Unix seconds), datetime, date, Timestamp, LegacyDate"


def as_instant(value: TimePoint | None) -> Timestamp | None:
    """Project a time point onto the canonical instant.

    Accepts:
    - int: raw counter, classified as seconds or millis (0 is absent)
    - datetime: naive values are local time, aware values keep their offset
    - date: local midnight of that day
    - Timestamp / LegacyDate: passed through
    - None: absent
    """
    if value is None:
        return None
    if isinstance(value, Timestamp):
        return value
    if isinstance(value, LegacyDate):
        return Timestamp(millis=value.millis)
    if isinstance(value, int) and not isinstance(value, bool):
        millis = normalize_counter(value)
        return None if millis is None else Timestamp(millis=millis)
    if isinstance(value, datetime):
        return timestamp_of(value)
    if isinstance(value, date):
        return timestamp_of(datetime.combine(value, time.min))
    raise UnsupportedTypeError(value, ACCEPTED)


def as_date_time(value: TimePoint | None) -> datetime | None:
    """Project a time point onto a naive local date-time.

    Dates become local midnight; aware date-times are moved into the local
    zone and made naive.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    instant = as_instant(value)
    if instant is None:
        return None
    return to_local(instant.millis, instant.nanos)


def as_date(value: TimePoint | None) -> date | None:
    """Project a time point onto its local calendar date (time-of-day dropped)."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    moment = as_date_time(value)
    return None if moment is None else moment.date()
