"""Tests for the cross-form comparator."""

from datetime import date, datetime, timezone
from itertools import product

import pytest

from chronoform import (
    AbsentValueError,
    LegacyDate,
    Timestamp,
    UnsupportedTypeError,
    compare,
)

MILLIS = 1700000000000  # 2023-11-14T22:13:20Z
DAY = 86_400_000


def forms(millis: int) -> list:
    """The same instant in each of the five forms (date is its local day)."""
    moment = datetime.fromtimestamp(millis / 1000, tz=timezone.utc).replace(
        tzinfo=None
    )
    return [
        millis,
        moment,
        moment.date(),
        Timestamp(millis=millis),
        LegacyDate(millis=millis),
    ]


EARLIER = forms(MILLIS)
LATER = forms(MILLIS + 2 * DAY)
EVERYTHING = EARLIER + LATER + [1700000000, Timestamp(millis=MILLIS, nanos=1)]


@pytest.mark.parametrize("a, b", list(product(EARLIER, LATER)))
def test_earlier_sorts_before_later_across_every_form_pair(a, b):
    assert compare(a, b) == -1
    assert compare(b, a) == 1


@pytest.mark.parametrize("a, b", list(product(EVERYTHING, EVERYTHING)))
def test_antisymmetric(a, b):
    assert compare(a, b) == -compare(b, a)


@pytest.mark.parametrize("a", EVERYTHING)
def test_reflexive(a):
    assert compare(a, a) == 0


def test_same_instant_in_instant_forms_is_equal():
    assert compare(MILLIS, Timestamp(millis=MILLIS)) == 0
    assert compare(LegacyDate(millis=MILLIS), datetime(2023, 11, 14, 22, 13, 20)) == 0
    assert compare(1700000000, LegacyDate(millis=MILLIS)) == 0


def test_raw_counters_compare_by_magnitude_without_classification():
    """Two counters are never scaled, even when one reads as seconds."""
    assert compare(1700000000, MILLIS) == -1


def test_calendar_dates_compare_by_day_against_instants():
    same_day = datetime(2023, 11, 14, 22, 13, 20)
    assert compare(date(2023, 11, 14), Timestamp(millis=MILLIS)) == 0
    assert compare(date(2023, 11, 14), MILLIS) == 0
    assert compare(LegacyDate(millis=MILLIS), date(2023, 11, 14)) == 0
    # against a date-time the date is promoted to midnight
    assert compare(date(2023, 11, 14), same_day) == -1


def test_timestamp_nanos_break_ties():
    assert compare(Timestamp(millis=MILLIS), Timestamp(millis=MILLIS, nanos=1)) == -1


def test_aware_and_naive_date_times_compare(cet_zone):
    aware = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
    assert compare(aware, datetime(2023, 11, 14, 23, 13, 20)) == 0


@pytest.mark.parametrize("absent", [None, 0])
def test_absent_operand_raises(absent):
    with pytest.raises(AbsentValueError, match="compare"):
        compare(absent, datetime(2023, 1, 1))


def test_unsupported_operand_raises():
    with pytest.raises(UnsupportedTypeError):
        compare("2023-11-14", MILLIS)

    with pytest.raises(UnsupportedTypeError):
        compare(True, MILLIS)
