"""Canonical time point and the epoch classifier.

The canonical representation is a signed count of milliseconds since
1970-01-01T00:00:00 UTC. It is projected onto calendar fields in the process
local time zone, so ``to_local`` and ``from_local`` follow whatever zone the
process runs in (``TZ`` / ``time.tzset``).
"""

from datetime import datetime, timedelta, timezone

import structlog

from chronoform.instant import Timestamp
from chronoform.util import MICROS_PER_MILLI, NANOS_PER_MICRO, SECOND

logger = structlog.get_logger()

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLI = timedelta(milliseconds=1)

# Counters with at most this many digits are read as seconds.
UNIX_DIGITS = 10


def is_unix_epoch(counter: int) -> bool:
    """Return True if ``counter`` should be read as Unix seconds.

    The rule is textual: a counter whose absolute value has at most ten
    decimal digits is seconds, anything longer is milliseconds. ``9999999999``
    is seconds, ``10000000000`` is milliseconds.

    Known ambiguity: millisecond counters that fit in ten digits (instants
    before 2001-09-09T01:46:40Z) are misread as seconds, and second counters
    needing eleven digits (after 2286-11-20) are misread as milliseconds.
    The heuristic is kept for compatibility; every raw-counter entry point
    goes through this function, so a range-based rule can replace it here.
    """
    return len(str(abs(counter))) <= UNIX_DIGITS


def normalize_counter(counter: int | None) -> int | None:
    """Map a raw counter onto canonical milliseconds.

    ``None`` and ``0`` both mean "no value" and give ``None``. Counters
    classified as Unix seconds are scaled by 1000.
    """
    if counter is None or counter == 0:
        return None
    if is_unix_epoch(counter):
        logger.debug("epoch.scaled", counter=counter, unit="seconds")
        return counter * SECOND
    return counter


def to_local(millis: int, nanos: int = 0) -> datetime:
    """Project canonical millis (plus sub-milli nanos) onto local date-time."""
    instant = _EPOCH + timedelta(
        milliseconds=millis, microseconds=nanos // NANOS_PER_MICRO
    )
    return instant.astimezone().replace(tzinfo=None)


def from_local(value: datetime) -> int:
    """Canonical millis of a date-time; naive values are read as local time.

    Sub-millisecond digits are floored, matching the millisecond resolution
    of the canonical representation.
    """
    aware = value.astimezone() if value.tzinfo is None else value
    return (aware - _EPOCH) // _ONE_MILLI


def timestamp_of(value: datetime) -> Timestamp:
    """Timestamp of a date-time, keeping microseconds as sub-milli nanos."""
    nanos = (value.microsecond % MICROS_PER_MILLI) * NANOS_PER_MICRO
    return Timestamp(millis=from_local(value), nanos=nanos)
