"""Total ordering over time points expressed in any supported form.

The common form is picked from the pair of operand kinds:

- two raw counters compare by magnitude, with no classification
- the same kind compares natively
- counters, timestamps and legacy dates compare on canonical instants
- a calendar date against anything but a date-time compares by date
- everything else compares as local date-time (a date becomes midnight)
"""

from datetime import date, datetime
from typing import Literal

from chronoform.errors import AbsentValueError, UnsupportedTypeError
from chronoform.instant import LegacyDate, TimePoint, Timestamp
from chronoform.normalize import ACCEPTED, as_date, as_date_time, as_instant

Kind = Literal["counter", "date_time", "date", "timestamp", "legacy"]

_INSTANT_KINDS: frozenset[Kind] = frozenset({"counter", "timestamp", "legacy"})


def _kind(value: TimePoint) -> Kind:
    if isinstance(value, bool):
        raise UnsupportedTypeError(value, ACCEPTED)
    if isinstance(value, int):
        return "counter"
    if isinstance(value, datetime):
        return "date_time"
    if isinstance(value, date):
        return "date"
    if isinstance(value, Timestamp):
        return "timestamp"
    if isinstance(value, LegacyDate):
        return "legacy"
    raise UnsupportedTypeError(value, ACCEPTED)


def _sign(left: object, right: object) -> int:
    return (left > right) - (left < right)  # type: ignore[operator]


def _present(value: object) -> object:
    if value is None:
        raise AbsentValueError("compare", value)
    return value


def compare(a: TimePoint, b: TimePoint) -> int:
    """Return -1, 0 or 1 as ``a`` is before, equal to or after ``b``.

    Raises:
        AbsentValueError: If either side is None or a zero raw counter
            (except when both sides are raw counters)
        UnsupportedTypeError: If either side is not a supported form
    """
    _present(a)
    _present(b)
    kind_a, kind_b = _kind(a), _kind(b)

    # Naive and aware date-times do not order natively; they fall through.
    if kind_a == kind_b and kind_a != "date_time":
        return _sign(a, b)
    if kind_a in _INSTANT_KINDS and kind_b in _INSTANT_KINDS:
        return _sign(_present(as_instant(a)), _present(as_instant(b)))
    if "date" in (kind_a, kind_b) and "date_time" not in (kind_a, kind_b):
        return _sign(_present(as_date(a)), _present(as_date(b)))
    return _sign(_present(as_date_time(a)), _present(as_date_time(b)))
