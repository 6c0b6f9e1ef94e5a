from .compare import compare
from .config import DEFAULT_PATTERN, Settings
from .converter import Converter
from .core import Chronoform
from .dates import Dates
from .diff import diff, diff_in
from .durations import (
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
from .epoch import is_unix_epoch
from .errors import (
    AbsentValueError,
    ChronoformError,
    FormatMismatchError,
    LocaleError,
    UnsupportedTypeError,
)
from .instant import DateType, LegacyDate, TimePoint, Timestamp
from .units import TimeUnit

__all__ = [
    "Chronoform",
    "Converter",
    "Dates",
    "Settings",
    "DEFAULT_PATTERN",
    "Timestamp",
    "LegacyDate",
    "DateType",
    "TimePoint",
    "TimeUnit",
    "is_unix_epoch",
    "compare",
    "diff",
    "diff_in",
    "duration_in_centuries",
    "duration_in_years",
    "duration_in_months",
    "duration_in_weeks",
    "duration_in_days",
    "duration_in_hours",
    "duration_in_minutes",
    "duration_in_seconds",
    "duration_in_millis",
    "duration_in_micros",
    "duration_in_nanos",
    "total_duration_in_years",
    "total_duration_in_months",
    "total_duration_in_days",
    "ChronoformError",
    "FormatMismatchError",
    "LocaleError",
    "UnsupportedTypeError",
    "AbsentValueError",
]
