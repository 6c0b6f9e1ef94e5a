"""Conversion engine between every supported time point form.

Every ``to_*`` method accepts any of: a raw counter (``int``, epoch millis or
Unix seconds), ``datetime``, ``date``, ``Timestamp``, ``LegacyDate`` or a
formatted ``str``. Absent input (``None``, ``""``, ``0``) yields ``None``;
conversion never raises for absence.

Strings are parsed with the explicit ``locale``/``pattern`` arguments, or the
converter's defaults where they are omitted. Anything that passes through a
calendar date loses its time of day (local midnight is substituted).
"""

from datetime import date, datetime

from chronoform.config import DEFAULT_PATTERN, Configurable
from chronoform.epoch import is_unix_epoch, timestamp_of
from chronoform.formatting import format_datetime, format_default, parse_datetime
from chronoform.instant import LegacyDate, TimePoint, Timestamp
from chronoform.normalize import as_date_time, as_instant
from chronoform.util import SECOND, div_toward_zero

Convertible = TimePoint | str | None


class Converter(Configurable):
    """Bidirectional mapping between the canonical instant and each form.

    Example:
        >>> converter = Converter(pattern="%d/%m/%Y")
        >>> converter.to_local_date("25/12/2023")
        datetime.date(2023, 12, 25)
        >>> converter.to_string(date(2023, 12, 25), pattern="%Y-%m-%d")
        '2023-12-25'
    """

    def __init__(
        self, locale: str | None = None, pattern: str = DEFAULT_PATTERN
    ) -> None:
        super().__init__(locale, pattern)

    def is_unix_timestamp(self, counter: int) -> bool:
        """True if the raw counter reads as Unix seconds (ten digits or fewer)."""
        return is_unix_epoch(counter)

    def _parse(
        self, text: str, locale: str | None, pattern: str | None
    ) -> datetime | None:
        if text == "":
            return None
        locale, pattern = self.settings.resolve(locale, pattern)
        return as_date_time(parse_datetime(text, pattern, locale))

    def _instant(
        self, value: Convertible, locale: str | None, pattern: str | None
    ) -> Timestamp | None:
        if isinstance(value, str):
            parsed = self._parse(value, locale, pattern)
            return None if parsed is None else timestamp_of(parsed)
        return as_instant(value)

    def _calendar(
        self, value: Convertible, locale: str | None, pattern: str | None
    ) -> datetime | None:
        if isinstance(value, str):
            return self._parse(value, locale, pattern)
        return as_date_time(value)

    def to_timestamp(
        self,
        value: Convertible,
        locale: str | None = None,
        pattern: str | None = None,
    ) -> int | None:
        """Epoch milliseconds of ``value``."""
        instant = self._instant(value, locale, pattern)
        return None if instant is None else instant.millis

    def to_unix_timestamp(
        self,
        value: Convertible,
        locale: str | None = None,
        pattern: str | None = None,
    ) -> int | None:
        """Epoch seconds of ``value``, truncated toward zero."""
        millis = self.to_timestamp(value, locale, pattern)
        return None if millis is None else div_toward_zero(millis, SECOND)

    def to_sql_timestamp(
        self,
        value: Convertible,
        locale: str | None = None,
        pattern: str | None = None,
    ) -> Timestamp | None:
        return self._instant(value, locale, pattern)

    def to_date(
        self,
        value: Convertible,
        locale: str | None = None,
        pattern: str | None = None,
    ) -> LegacyDate | None:
        """Legacy millisecond date value; sub-millisecond digits are dropped."""
        instant = self._instant(value, locale, pattern)
        return None if instant is None else LegacyDate(millis=instant.millis)

    def to_local_date(
        self,
        value: Convertible,
        locale: str | None = None,
        pattern: str | None = None,
    ) -> date | None:
        """Local calendar date of ``value``; the time of day is discarded."""
        moment = self._calendar(value, locale, pattern)
        return None if moment is None else moment.date()

    def to_local_date_time(
        self,
        value: Convertible,
        locale: str | None = None,
        pattern: str | None = None,
    ) -> datetime | None:
        """Naive local date-time of ``value``; dates become midnight."""
        return self._calendar(value, locale, pattern)

    def to_string(
        self,
        value: Convertible,
        locale: str | None = None,
        pattern: str | None = None,
    ) -> str | None:
        """Render ``value`` with a pattern and locale (defaults where omitted).

        A string ``value`` is first parsed with the converter's defaults, so
        this reformats it into the requested pattern.
        """
        if isinstance(value, str):
            moment = self._parse(value, None, None)
        else:
            moment = as_date_time(value)
        if moment is None:
            return None
        locale, pattern = self.settings.resolve(locale, pattern)
        return format_datetime(moment, pattern, locale)

    def to_default_format_string(
        self, value: Convertible, locale: str | None = None
    ) -> str | None:
        """Render the date part in the locale's short form (``%x``)."""
        moment = self._calendar(value, None, None)
        if moment is None:
            return None
        if locale is None:
            locale = self.default_locale
        return format_default(moment.date(), locale)
