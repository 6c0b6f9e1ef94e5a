"""Greedy decomposition of the elapsed time between two time points."""

from chronoform.errors import AbsentValueError
from chronoform.instant import TimePoint, Timestamp
from chronoform.normalize import as_instant
from chronoform.units import TimeUnit


def _millis(value: TimePoint, operation: str) -> int:
    instant: Timestamp | None = as_instant(value)
    if instant is None:
        raise AbsentValueError(operation, value)
    return instant.millis


def elapsed_millis(start: TimePoint, end: TimePoint) -> int:
    """Signed milliseconds from ``start`` to ``end``."""
    return _millis(end, "diff") - _millis(start, "diff")


def diff(start: TimePoint, end: TimePoint) -> dict[TimeUnit, int]:
    """Break the interval from ``start`` to ``end`` down across every unit.

    Units are visited largest first; each takes as many whole units as fit
    in what remains and carries the rest to the next smaller unit. Every unit
    appears in the result (zero counts included) in that order, and the
    counts are signed: an ``end`` before ``start`` gives non-positive counts.

    Example:
        >>> diff(datetime(2024, 1, 1), datetime(2024, 1, 2, 3, 4, 5))
        {<TimeUnit.DAYS: ...>: 1, <TimeUnit.HOURS: ...>: 3, ...}
    """
    remaining = elapsed_millis(start, end)
    result: dict[TimeUnit, int] = {}
    for unit in TimeUnit.descending():
        count = unit.from_millis(remaining)
        remaining -= unit.to_millis(count)
        result[unit] = count
    return result


def diff_in(start: TimePoint, end: TimePoint, unit: TimeUnit) -> int:
    """Whole ``unit``s from ``start`` to ``end``, truncated toward zero."""
    return unit.from_millis(elapsed_millis(start, end))
