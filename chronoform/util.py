"""Utility constants and helpers for chronoform.

Time unit constants represent durations in milliseconds, the resolution of
the canonical time point. Nanosecond scales are used by the unit enumeration.
"""

# Time unit constants (all values in milliseconds)
SECOND = 1000
MINUTE = 60_000
HOUR = 3_600_000
DAY = 86_400_000

NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000
MICROS_PER_MILLI = 1_000


def div_toward_zero(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero instead of flooring.

    Negative intervals must mirror positive ones (``-1500ms`` is ``-1s``),
    which ``//`` alone does not give.
    """
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient
