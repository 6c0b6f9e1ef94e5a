"""Date utility facade: current time in every form, comparison and durations.

The arithmetic lives in ``compare``, ``diff`` and ``durations``; ``Dates``
adds the current-time producers and shares its defaults with a ``Converter``.
"""

from collections.abc import Callable
from datetime import date, datetime
from time import time_ns

from chronoform import durations
from chronoform.compare import compare as compare_points
from chronoform.config import DEFAULT_PATTERN, Settings
from chronoform.converter import Converter
from chronoform.diff import diff, diff_in
from chronoform.epoch import is_unix_epoch, to_local
from chronoform.formatting import format_datetime, format_default
from chronoform.instant import DateType, LegacyDate, TimePoint, Timestamp
from chronoform.units import TimeUnit
from chronoform.util import NANOS_PER_MILLI, SECOND, div_toward_zero


class Dates:
    """Current time, comparison, difference and duration operations.

    Args:
        locale: Default locale for rendered strings (None = process locale)
        pattern: Default strftime pattern
        clock: Zero-argument callable returning epoch nanoseconds
        converter: Converter to share defaults with; one is created if omitted

    Example:
        >>> dates = Dates()
        >>> dates.total_duration_in_days(date(2020, 1, 1), date(2021, 3, 2))
        426
        >>> dates.compare(1700000000, datetime(2023, 1, 1))
        1
    """

    def __init__(
        self,
        locale: str | None = None,
        pattern: str = DEFAULT_PATTERN,
        *,
        clock: Callable[[], int] = time_ns,
        converter: Converter | None = None,
    ) -> None:
        self.converter: Converter = converter or Converter(locale, pattern)
        self._clock: Callable[[], int] = clock

    # Configuration is held by the converter so both see the same snapshot.

    @property
    def settings(self) -> Settings:
        return self.converter.settings

    @property
    def default_locale(self) -> str | None:
        return self.converter.default_locale

    def set_default_locale(self, locale: str | None) -> None:
        self.converter.set_default_locale(locale)

    @property
    def default_pattern(self) -> str:
        return self.converter.default_pattern

    def set_default_pattern(self, pattern: str) -> None:
        self.converter.set_default_pattern(pattern)

    def is_unix_timestamp(self, counter: int) -> bool:
        return is_unix_epoch(counter)

    # Current time

    def _current(self) -> Timestamp:
        millis, nanos = divmod(self._clock(), NANOS_PER_MILLI)
        return Timestamp(millis=millis, nanos=nanos)

    def now(
        self, kind: DateType | None = None
    ) -> datetime | date | LegacyDate | Timestamp | int | str:
        """Current time as a local date-time, or in the form ``kind`` names."""
        if kind is None:
            return self.local_date_time()
        producers: dict[DateType, Callable[[], object]] = {
            DateType.TIMESTAMP: self.timestamp,
            DateType.SQL_TIMESTAMP: self.sql_timestamp,
            DateType.UNIX_TIMESTAMP: self.unix_timestamp,
            DateType.DATE: self.date,
            DateType.STRING_DATE: self.string,
            DateType.LOCAL_DATE: self.local_date,
            DateType.STRING_LOCAL_DATE: self.string_local_date,
            DateType.LOCAL_DATE_TIME: self.local_date_time,
            DateType.STRING_LOCAL_DATE_TIME: self.string_local_date_time,
        }
        return producers[kind]()  # type: ignore[return-value]

    def local_date_time(self) -> datetime:
        current = self._current()
        return to_local(current.millis, current.nanos)

    def local_date(self) -> date:
        return self.local_date_time().date()

    def date(self) -> LegacyDate:
        return LegacyDate(millis=self._current().millis)

    def timestamp(self) -> int:
        """Current epoch milliseconds."""
        return self._current().millis

    def unix_timestamp(self) -> int:
        """Current epoch seconds."""
        return div_toward_zero(self._current().millis, SECOND)

    def sql_timestamp(self) -> Timestamp:
        return self._current()

    def string(self, pattern: str | None = None) -> str:
        """Current local date-time rendered with ``pattern`` (or the default)."""
        locale, pattern = self.settings.resolve(None, pattern)
        return format_datetime(self.local_date_time(), pattern, locale)

    def string_local_date(
        self, locale: str | None = None, pattern: str | None = None
    ) -> str:
        """Today's date; the locale's own date format when no pattern is given."""
        if locale is None:
            locale = self.default_locale
        if pattern is None:
            return format_default(self.local_date(), locale)
        return format_datetime(self.local_date(), pattern, locale)

    def string_local_date_time(
        self, locale: str | None = None, pattern: str | None = None
    ) -> str:
        """Current date-time; the locale's own format when no pattern is given."""
        if locale is None:
            locale = self.default_locale
        if pattern is None:
            return format_default(self.local_date_time(), locale, with_time=True)
        return format_datetime(self.local_date_time(), pattern, locale)

    # Comparison and differences

    def compare(self, a: TimePoint, b: TimePoint) -> int:
        return compare_points(a, b)

    def diff(self, start: TimePoint, end: TimePoint) -> dict[TimeUnit, int]:
        return diff(start, end)

    def diff_in(self, start: TimePoint, end: TimePoint, unit: TimeUnit) -> int:
        return diff_in(start, end, unit)

    # Durations

    def duration_in_centuries(self, start: TimePoint, end: TimePoint) -> int:
        return durations.duration_in_centuries(start, end)

    def duration_in_years(self, start: TimePoint, end: TimePoint) -> int:
        return durations.duration_in_years(start, end)

    def total_duration_in_years(self, start: TimePoint, end: TimePoint) -> int:
        return durations.total_duration_in_years(start, end)

    def duration_in_months(self, start: TimePoint, end: TimePoint) -> int:
        return durations.duration_in_months(start, end)

    def total_duration_in_months(self, start: TimePoint, end: TimePoint) -> int:
        return durations.total_duration_in_months(start, end)

    def duration_in_weeks(self, start: TimePoint, end: TimePoint) -> int:
        return durations.duration_in_weeks(start, end)

    def duration_in_days(self, start: TimePoint, end: TimePoint) -> int:
        return durations.duration_in_days(start, end)

    def total_duration_in_days(self, start: TimePoint, end: TimePoint) -> int:
        return durations.total_duration_in_days(start, end)

    def duration_in_hours(self, start: TimePoint, end: TimePoint) -> int:
        return durations.duration_in_hours(start, end)

    def duration_in_minutes(self, start: TimePoint, end: TimePoint) -> int:
        return durations.duration_in_minutes(start, end)

    def duration_in_seconds(self, start: TimePoint, end: TimePoint) -> int:
        return durations.duration_in_seconds(start, end)

    def duration_in_millis(self, start: TimePoint, end: TimePoint) -> int:
        return durations.duration_in_millis(start, end)

    def duration_in_micros(self, start: TimePoint, end: TimePoint) -> int:
        return durations.duration_in_micros(start, end)

    def duration_in_nanos(self, start: TimePoint, end: TimePoint) -> int:
        return durations.duration_in_nanos(start, end)
