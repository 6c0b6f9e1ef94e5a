from collections.abc import Callable
from time import time_ns

from chronoform.config import DEFAULT_PATTERN
from chronoform.converter import Converter
from chronoform.dates import Dates


class Chronoform:
    """Entry point bundling a ``Dates`` and a ``Converter`` with shared defaults.

    Example:
        >>> chrono = Chronoform(locale="C", pattern="%d/%m/%Y")
        >>> chrono.converter.to_local_date("25/12/2023")
        datetime.date(2023, 12, 25)
        >>> chrono.dates.total_duration_in_days(date(2020, 1, 1), date(2021, 3, 2))
        426

    Changing a default through either attribute changes it for both.
    """

    def __init__(
        self,
        locale: str | None = None,
        pattern: str = DEFAULT_PATTERN,
        *,
        clock: Callable[[], int] = time_ns,
    ) -> None:
        self.converter: Converter = Converter(locale, pattern)
        self.dates: Dates = Dates(clock=clock, converter=self.converter)
