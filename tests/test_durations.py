"""Tests for the component, total and elapsed duration families."""

from datetime import date, datetime

import pytest

from chronoform import (
    AbsentValueError,
    LegacyDate,
    Timestamp,
    duration_in_centuries,
    duration_in_days,
    duration_in_hours,
    duration_in_micros,
    duration_in_millis,
    duration_in_minutes,
    duration_in_months,
    duration_in_nanos,
    duration_in_seconds,
    duration_in_weeks,
    duration_in_years,
    total_duration_in_days,
    total_duration_in_months,
    total_duration_in_years,
)
from chronoform.durations import Period, period_between

MILLIS = 1700000000000


def test_totals_over_a_leap_year():
    start, end = date(2020, 1, 1), date(2021, 3, 2)

    assert total_duration_in_days(start, end) == 426
    assert total_duration_in_months(start, end) == 14
    assert total_duration_in_years(start, end) == 1
    assert duration_in_weeks(start, end) == 60


def test_components_and_totals_differ():
    """1 year, 1 month and 3 days is 13 total months and 400 total days."""
    start, end = date(2019, 12, 31), date(2021, 2, 3)

    assert duration_in_years(start, end) == 1
    assert duration_in_months(start, end) == 1
    assert duration_in_days(start, end) == 3
    assert total_duration_in_months(start, end) == 13
    assert total_duration_in_days(start, end) == 400


def test_leap_day_anniversary_is_not_a_whole_year():
    """The period borrows a month instead of clipping Feb 29 to Feb 28."""
    start, end = date(2020, 2, 29), date(2021, 2, 28)

    assert (
        duration_in_years(start, end),
        duration_in_months(start, end),
        duration_in_days(start, end),
    ) == (0, 11, 30)
    assert total_duration_in_years(start, end) == 0
    assert total_duration_in_months(start, end) == 11


def test_month_end_into_a_shorter_month():
    start, end = date(2020, 1, 31), date(2020, 2, 29)

    assert (duration_in_months(start, end), duration_in_days(start, end)) == (0, 29)
    assert total_duration_in_months(start, end) == 0
    assert total_duration_in_days(start, end) == 29


def test_borrowed_month_counts_remaining_days_exactly():
    """Jan 30 plus one month lands on Feb 29, leaving one day to Mar 1."""
    start, end = date(2020, 1, 30), date(2020, 3, 1)

    assert period_between(start, end) == Period(years=0, months=1, days=1)
    assert total_duration_in_months(start, end) == 1
    assert total_duration_in_days(start, end) == 31


def test_reversed_period_borrows_from_the_end_month():
    assert period_between(date(2021, 2, 3), date(2019, 12, 31)) == Period(
        years=-1, months=-1, days=-3
    )
    assert period_between(date(2020, 3, 15), date(2020, 2, 20)) == Period(
        years=0, months=0, days=-24
    )


def test_swapping_operands_flips_the_sign():
    start, end = date(2019, 12, 31), date(2021, 2, 3)

    assert total_duration_in_days(end, start) == -400
    assert total_duration_in_months(end, start) == -13
    assert total_duration_in_years(end, start) == -1
    assert duration_in_weeks(end, start) == -57


def test_centuries():
    assert duration_in_centuries(date(1900, 1, 1), date(2024, 6, 1)) == 1
    assert duration_in_centuries(date(2024, 6, 1), date(1900, 1, 1)) == -1
    assert duration_in_centuries(date(1950, 1, 1), date(2024, 6, 1)) == 0


def test_day_based_durations_ignore_time_of_day():
    start = datetime(2023, 1, 1, 23)
    end = datetime(2023, 1, 2, 1)

    assert total_duration_in_days(start, end) == 1
    assert duration_in_days(start, end) == 1
    assert duration_in_hours(start, end) == 2


def test_elapsed_units():
    start = datetime(2024, 1, 1)
    end = datetime(2024, 1, 1, 0, 0, 1, 500)

    assert duration_in_seconds(start, end) == 1
    assert duration_in_millis(start, end) == 1000
    assert duration_in_micros(start, end) == 1_000_500
    assert duration_in_nanos(start, end) == 1_000_500_000
    assert duration_in_minutes(start, end) == 0


def test_elapsed_units_truncate_toward_zero():
    start = datetime(2024, 1, 1, 10)
    end = datetime(2024, 1, 1, 8, 30)

    assert duration_in_hours(start, end) == -1
    assert duration_in_minutes(start, end) == -90
    assert duration_in_hours(end, start) == 1


def test_every_form_is_accepted():
    hour_later = MILLIS + 3_600_000

    assert duration_in_hours(Timestamp(millis=MILLIS), hour_later) == 1
    assert duration_in_minutes(LegacyDate(millis=MILLIS), 1700003600) == 60
    assert total_duration_in_days(MILLIS, date(2023, 11, 16)) == 2


def test_timestamp_nanos_count_to_the_microsecond():
    start = Timestamp(millis=MILLIS)
    end = Timestamp(millis=MILLIS, nanos=456789)

    assert duration_in_nanos(start, end) == 456000
    assert duration_in_micros(start, end) == 456


@pytest.mark.parametrize("absent", [None, 0])
@pytest.mark.parametrize(
    "duration",
    [duration_in_years, total_duration_in_months, duration_in_weeks, duration_in_hours],
)
def test_absent_operand_raises(duration, absent):
    with pytest.raises(AbsentValueError, match=duration.__name__):
        duration(absent, date(2024, 1, 1))
