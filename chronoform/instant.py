from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import TypeAlias

from chronoform.util import NANOS_PER_MILLI


@dataclass(frozen=True, kw_only=True, order=True)
class Timestamp:
    """Database-style timestamp.

    ``millis`` is the canonical epoch-millisecond count; ``nanos`` holds the
    sub-millisecond remainder so the value has nanosecond capacity.
    """

    millis: int
    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanos < NANOS_PER_MILLI:
            raise ValueError(
                f"Timestamp nanos ({self.nanos}) must be in [0, {NANOS_PER_MILLI})"
            )

    def __str__(self) -> str:
        return f"Timestamp({self.millis}ms+{self.nanos}ns)"


@dataclass(frozen=True, kw_only=True, order=True)
class LegacyDate:
    """Millisecond-resolution instant kept for older call sites."""

    millis: int

    def __str__(self) -> str:
        return f"LegacyDate({self.millis}ms)"


class DateType(Enum):
    """Every external form a current time can be produced in."""

    TIMESTAMP = "timestamp"
    SQL_TIMESTAMP = "sql_timestamp"
    UNIX_TIMESTAMP = "unix_timestamp"
    DATE = "date"
    STRING_DATE = "string_date"
    LOCAL_DATE = "local_date"
    STRING_LOCAL_DATE = "string_local_date"
    LOCAL_DATE_TIME = "local_date_time"
    STRING_LOCAL_DATE_TIME = "string_local_date_time"


# Raw counters are plain ints; datetime must stay listed even though it
# subclasses date, since the two compare differently.
TimePoint: TypeAlias = int | datetime | date | Timestamp | LegacyDate
