from enum import Enum

from chronoform.util import DAY, HOUR, MINUTE, NANOS_PER_MILLI, SECOND, div_toward_zero


class TimeUnit(Enum):
    """Discrete elapsed-time units, valued by their length in nanoseconds."""

    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = NANOS_PER_MILLI
    SECONDS = SECOND * NANOS_PER_MILLI
    MINUTES = MINUTE * NANOS_PER_MILLI
    HOURS = HOUR * NANOS_PER_MILLI
    DAYS = DAY * NANOS_PER_MILLI

    @property
    def nanos(self) -> int:
        return self.value

    def from_nanos(self, nanos: int) -> int:
        """Whole units in ``nanos``, truncated toward zero."""
        return div_toward_zero(nanos, self.value)

    def from_millis(self, millis: int) -> int:
        """Whole units in ``millis``, truncated toward zero."""
        return self.from_nanos(millis * NANOS_PER_MILLI)

    def to_millis(self, count: int) -> int:
        """Milliseconds spanned by ``count`` units, truncated toward zero."""
        return div_toward_zero(count * self.value, NANOS_PER_MILLI)

    @classmethod
    def descending(cls) -> list["TimeUnit"]:
        """All units from largest to smallest."""
        return sorted(cls, key=lambda unit: unit.value, reverse=True)
