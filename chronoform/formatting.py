"""Pass-through to the host formatter (``strftime`` / ``strptime``).

Patterns are opaque: they are handed to the standard library unchanged and
only the host grammar decides what they mean. Locales are opaque too; they
are applied to ``LC_TIME`` for the duration of one call.

``setlocale`` is process-wide, so every format or parse call holds
``_LOCALE_LOCK``, including calls that keep the process locale.
"""

import locale as host_locale
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date, datetime

import structlog

from chronoform.errors import FormatMismatchError, LocaleError

logger = structlog.get_logger()

# The locale's short date (and date-time) representation.
DEFAULT_DATE_FORMAT = "%x"
DEFAULT_DATE_TIME_FORMAT = "%c"

_LOCALE_LOCK = threading.RLock()


@contextmanager
def use_locale(name: str | None) -> Iterator[None]:
    """Run the body with ``LC_TIME`` set to ``name``, then restore it.

    ``None`` keeps the process locale.
    """
    with _LOCALE_LOCK:
        if name is None:
            yield
            return

        previous = host_locale.setlocale(host_locale.LC_TIME)
        try:
            host_locale.setlocale(host_locale.LC_TIME, name)
        except host_locale.Error as exc:
            raise LocaleError(name) from exc

        logger.debug("formatting.locale_switched", locale=name, previous=previous)
        try:
            yield
        finally:
            host_locale.setlocale(host_locale.LC_TIME, previous)


def format_datetime(value: date, pattern: str, locale: str | None = None) -> str:
    """Render a date or date-time with a strftime pattern."""
    with use_locale(locale):
        return value.strftime(pattern)


def format_default(
    value: date, locale: str | None = None, *, with_time: bool = False
) -> str:
    """Render with the locale's own date (or date-time) representation."""
    pattern = DEFAULT_DATE_TIME_FORMAT if with_time else DEFAULT_DATE_FORMAT
    return format_datetime(value, pattern, locale)


def parse_datetime(text: str, pattern: str, locale: str | None = None) -> datetime:
    """Parse ``text`` with a strptime pattern into a naive date-time.

    Fields the pattern does not carry default to the host's defaults
    (midnight for a date-only pattern).

    Raises:
        FormatMismatchError: If ``text`` does not match ``pattern``
    """
    with use_locale(locale):
        try:
            return datetime.strptime(text, pattern)
        except ValueError as exc:
            logger.debug(
                "formatting.parse_failed", text=text, pattern=pattern, error=str(exc)
            )
            raise FormatMismatchError(text, pattern, locale) from exc
