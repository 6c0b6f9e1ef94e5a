"""Exception hierarchy for chronoform.

Absent inputs (``None``, ``""``, ``0``) are never errors during conversion;
these exceptions cover the remaining failure modes.
"""


class ChronoformError(Exception):
    """Base exception for every chronoform failure."""


class FormatMismatchError(ChronoformError, ValueError):
    """Raised when a string does not conform to the pattern it is parsed with."""

    def __init__(self, text: str, pattern: str, locale: str | None) -> None:
        super().__init__(
            f"Cannot parse {text!r} with pattern {pattern!r}"
            f" (locale: {locale or 'process default'}).\n"
            f"Hint: pass the pattern the string was written with:\n"
            f"  converter.to_local_date_time(text, pattern='%d/%m/%Y %H:%M')\n"
            f"  # or change the default: converter.set_default_pattern(...)"
        )
        self.text = text
        self.pattern = pattern
        self.locale = locale


class LocaleError(ChronoformError, ValueError):
    """Raised when the host platform does not know the requested locale."""

    def __init__(self, locale: str) -> None:
        super().__init__(
            f"Locale {locale!r} is not available on this platform.\n"
            f"Hint: use an installed locale (see `locale -a`), e.g. 'C' or "
            f"'en_US.UTF-8', or pass locale=None for the process default."
        )
        self.locale = locale


class UnsupportedTypeError(ChronoformError, TypeError):
    """Raised when a value is not one of the supported time point forms."""

    def __init__(self, value: object, accepted: str) -> None:
        super().__init__(
            f"Unsupported time value of type {type(value).__name__!r}: {value!r}\n"
            f"Accepted: {accepted}"
        )
        self.value = value


class AbsentValueError(ChronoformError, ValueError):
    """Raised when an operation that needs a time point receives an absent one.

    Conversions propagate absence; comparisons and durations cannot.
    """

    def __init__(self, operation: str, value: object) -> None:
        super().__init__(
            f"{operation}() received an absent time value: {value!r}\n"
            f"None, '' and the raw counter 0 all mean 'no value'."
        )
        self.operation = operation
        self.value = value
