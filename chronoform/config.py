"""Default (locale, pattern) configuration shared by converting components.

Each component holds one immutable ``Settings`` snapshot. Setters build a new
snapshot with ``dataclasses.replace`` and swap the reference, so a reader
that takes the snapshot once always sees a consistent pair even while another
thread changes the defaults.
"""

from dataclasses import dataclass, replace

DEFAULT_PATTERN = "%Y-%m-%d"


@dataclass(frozen=True, kw_only=True)
class Settings:
    locale: str | None = None
    pattern: str = DEFAULT_PATTERN

    def __post_init__(self) -> None:
        if not self.pattern:
            raise ValueError(
                "Settings pattern must be a non-empty strftime pattern, "
                f"got {self.pattern!r}"
            )

    def resolve(
        self, locale: str | None = None, pattern: str | None = None
    ) -> tuple[str | None, str]:
        """Fill in whichever of (locale, pattern) the caller omitted."""
        return (
            self.locale if locale is None else locale,
            self.pattern if pattern is None else pattern,
        )


class Configurable:
    """Mixin giving a component replaceable default locale and pattern."""

    def __init__(
        self, locale: str | None = None, pattern: str = DEFAULT_PATTERN
    ) -> None:
        self._settings: Settings = Settings(locale=locale, pattern=pattern)

    @property
    def settings(self) -> Settings:
        return self._settings

    @settings.setter
    def settings(self, settings: Settings) -> None:
        self._settings = settings

    @property
    def default_locale(self) -> str | None:
        return self._settings.locale

    def set_default_locale(self, locale: str | None) -> None:
        self._settings = replace(self._settings, locale=locale)

    @property
    def default_pattern(self) -> str:
        return self._settings.pattern

    def set_default_pattern(self, pattern: str) -> None:
        self._settings = replace(self._settings, pattern=pattern)
