"""Single-unit duration calculators.

Two families exist and they are not interchangeable:

- Component durations (``duration_in_years``, ``duration_in_months``,
  ``duration_in_days``) are fields of the calendar period between the two
  local dates. 2019-12-31 to 2021-02-03 is 1 year, 1 month and 3 days, so
  ``duration_in_months`` is 1.
- Total durations (``total_duration_in_*``) count whole units elapsed over
  the same dates: that interval is 13 total months and 400 total days.

The period never clips to a month end. When the end day-of-month falls short
of the start's, one month is borrowed and the days are counted exactly from
the last whole month: 2020-02-29 to 2021-02-28 is 11 months and 30 days (0
component years), and 2020-01-31 to 2020-02-29 is 0 months and 29 days.

Units below a day are elapsed-time counts over the date-time delta. Weeks
are total days // 7 and centuries are component years // 100. Everything
truncates toward zero, so swapping ``start`` and ``end`` flips the sign.

Every operand form is converted to local date-time first.
"""

from calendar import monthrange
from datetime import date, datetime, timedelta
from typing import NamedTuple

from dateutil.relativedelta import relativedelta

from chronoform.errors import AbsentValueError
from chronoform.instant import TimePoint
from chronoform.normalize import as_date_time
from chronoform.units import TimeUnit
from chronoform.util import NANOS_PER_MICRO, div_toward_zero

_ONE_MICRO = timedelta(microseconds=1)


class Period(NamedTuple):
    """Calendar period between two dates; every field carries the same sign."""

    years: int
    months: int
    days: int


def _moment(value: TimePoint, operation: str) -> datetime:
    moment = as_date_time(value)
    if moment is None:
        raise AbsentValueError(operation, value)
    return moment


def _dates(start: TimePoint, end: TimePoint, operation: str) -> tuple[date, date]:
    return _moment(start, operation).date(), _moment(end, operation).date()


def period_between(start_day: date, end_day: date) -> Period:
    """Years, months and days from ``start_day`` to ``end_day``.

    Example:
        >>> period_between(date(2020, 2, 29), date(2021, 2, 28))
        Period(years=0, months=11, days=30)
    """
    total_months = (end_day.year - start_day.year) * 12 + (
        end_day.month - start_day.month
    )
    days = end_day.day - start_day.day
    if total_months > 0 and days < 0:
        total_months -= 1
        days = (end_day - (start_day + relativedelta(months=total_months))).days
    elif total_months < 0 and days > 0:
        total_months += 1
        days -= monthrange(end_day.year, end_day.month)[1]
    years = div_toward_zero(total_months, 12)
    return Period(years=years, months=total_months - years * 12, days=days)


def _period(start: TimePoint, end: TimePoint, operation: str) -> Period:
    return period_between(*_dates(start, end, operation))


def _elapsed_nanos(start: TimePoint, end: TimePoint, operation: str) -> int:
    delta = _moment(end, operation) - _moment(start, operation)
    return (delta // _ONE_MICRO) * NANOS_PER_MICRO


def _month_index(day: date) -> int:
    # Months since year 0, scaled so the day of month breaks ties.
    return (day.year * 12 + day.month - 1) * 32 + day.day


# Component family


def duration_in_centuries(start: TimePoint, end: TimePoint) -> int:
    return div_toward_zero(_period(start, end, "duration_in_centuries").years, 100)


def duration_in_years(start: TimePoint, end: TimePoint) -> int:
    """Years field of the calendar period between the two dates."""
    return _period(start, end, "duration_in_years").years


def duration_in_months(start: TimePoint, end: TimePoint) -> int:
    """Months field (0-11) of the calendar period between the two dates."""
    return _period(start, end, "duration_in_months").months


def duration_in_weeks(start: TimePoint, end: TimePoint) -> int:
    start_day, end_day = _dates(start, end, "duration_in_weeks")
    return div_toward_zero((end_day - start_day).days, 7)


def duration_in_days(start: TimePoint, end: TimePoint) -> int:
    """Days field of the calendar period, after whole years and months."""
    return _period(start, end, "duration_in_days").days


# Elapsed-time family


def duration_in_hours(start: TimePoint, end: TimePoint) -> int:
    return TimeUnit.HOURS.from_nanos(_elapsed_nanos(start, end, "duration_in_hours"))


def duration_in_minutes(start: TimePoint, end: TimePoint) -> int:
    return TimeUnit.MINUTES.from_nanos(
        _elapsed_nanos(start, end, "duration_in_minutes")
    )


def duration_in_seconds(start: TimePoint, end: TimePoint) -> int:
    return TimeUnit.SECONDS.from_nanos(
        _elapsed_nanos(start, end, "duration_in_seconds")
    )


def duration_in_millis(start: TimePoint, end: TimePoint) -> int:
    return TimeUnit.MILLISECONDS.from_nanos(
        _elapsed_nanos(start, end, "duration_in_millis")
    )


def duration_in_micros(start: TimePoint, end: TimePoint) -> int:
    return TimeUnit.MICROSECONDS.from_nanos(
        _elapsed_nanos(start, end, "duration_in_micros")
    )


def duration_in_nanos(start: TimePoint, end: TimePoint) -> int:
    return _elapsed_nanos(start, end, "duration_in_nanos")


# Total family


def total_duration_in_years(start: TimePoint, end: TimePoint) -> int:
    """Whole years elapsed between the two dates."""
    months = _total_months(start, end, "total_duration_in_years")
    return div_toward_zero(months, 12)


def total_duration_in_months(start: TimePoint, end: TimePoint) -> int:
    """Whole months elapsed: the end day-of-month must reach the start's."""
    return _total_months(start, end, "total_duration_in_months")


def total_duration_in_days(start: TimePoint, end: TimePoint) -> int:
    """Calendar days between the two local dates (time of day ignored)."""
    start_day, end_day = _dates(start, end, "total_duration_in_days")
    return (end_day - start_day).days


def _total_months(start: TimePoint, end: TimePoint, operation: str) -> int:
    start_day, end_day = _dates(start, end, operation)
    return div_toward_zero(_month_index(end_day) - _month_index(start_day), 32)
