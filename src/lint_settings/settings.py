"""Resolved lint settings and their combination."""
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Iterator, TypeVar

from lint_settings.kinds import LintKind, kind_order
from lint_settings.location import Loc
from lint_settings.logging_config import get_logger

T = TypeVar("T")
logger = get_logger(__name__)


@dataclass(frozen=True)
class LintSetting:
    """State of one lint kind and the directive it came from."""

    enabled: bool
    # None for settings that did not come from a located directive
    loc: Loc | None = None


def _ordered(entries: dict[LintKind, LintSetting]) -> dict[LintKind, LintSetting]:
    return dict(sorted(entries.items(), key=lambda item: kind_order(item[0])))


@dataclass(frozen=True)
class LintSettings:
    """Lint settings resolved from one or more sources.

    Instances are never mutated; every update returns a new value.
    """

    # Whether a kind without an explicit setting is enabled
    default_err: bool = False
    # Whether default_err was set by an "all=..." directive (used in merge)
    all_encountered: bool = False
    explicit_settings: dict[LintKind, LintSetting] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Own a copy of the map, keyed in canonical kind order
        object.__setattr__(self, "explicit_settings", _ordered(dict(self.explicit_settings)))

    def set_enabled(self, kind: LintKind, setting: LintSetting) -> "LintSettings":
        """Return a copy with ``kind`` set to ``setting``, overwriting any previous entry."""
        return replace(self, explicit_settings={**self.explicit_settings, kind: setting})

    def set_all(self, entries: Iterable[tuple[LintKind, LintSetting]]) -> "LintSettings":
        """Return a copy with every (kind, setting) pair applied in order."""
        settings = self
        for kind, setting in entries:
            settings = settings.set_enabled(kind, setting)
        return settings

    def get_default(self) -> bool:
        return self.default_err

    def is_enabled(self, kind: LintKind) -> bool:
        setting = self.explicit_settings.get(kind)
        if setting is None:
            return self.default_err
        return setting.enabled

    def is_suppressed(self, kind: LintKind) -> bool:
        return not self.is_enabled(kind)

    def get_loc(self, kind: LintKind) -> Loc | None:
        setting = self.explicit_settings.get(kind)
        if setting is None:
            return None
        return setting.loc

    def items(self) -> Iterator[tuple[LintKind, LintSetting]]:
        """Iterate over explicitly set kinds in canonical order."""
        return iter(self.explicit_settings.items())

    def for_each(self, func: Callable[[LintKind, LintSetting], None]) -> None:
        """Call ``func`` for every explicitly set kind."""
        for kind, setting in self.items():
            func(kind, setting)

    def fold(self, func: Callable[[LintKind, LintSetting, T], T], initial: T) -> T:
        """Fold over all explicitly set kinds.

        Args:
            func: Called as ``func(kind, setting, acc)``, returns the new accumulator
            initial: Starting accumulator

        Returns:
            Final accumulator
        """
        acc = initial
        for kind, setting in self.items():
            acc = func(kind, setting, acc)
        return acc

    def map(self, func: Callable[[LintSetting], LintSetting]) -> "LintSettings":
        """Return a copy with ``func`` applied to every explicit setting."""
        entries = {kind: func(setting) for kind, setting in self.items()}
        return replace(self, explicit_settings=entries)


def default_settings() -> LintSettings:
    """Return the empty settings every resolution starts from."""
    return LintSettings()


def all_setting(default_err: bool) -> LintSettings:
    """Return the settings produced by an "all=..." directive."""
    return LintSettings(default_err=default_err, all_encountered=True)


def strip_locations(settings: LintSettings) -> LintSettings:
    """Drop the origin of every explicit setting."""
    return settings.map(lambda setting: LintSetting(enabled=setting.enabled, loc=None))


def merge(low_prec: LintSettings, high_prec: LintSettings) -> LintSettings:
    """Merge two settings, with rules in high_prec overwriting rules in low_prec.

    A high_prec that used "all" replaces low_prec entirely.

    Args:
        low_prec: Lower-precedence settings, e.g. from a config file
        high_prec: Higher-precedence settings, e.g. from the command line

    Returns:
        Combined settings
    """
    if high_prec.all_encountered:
        logger.debug("Higher-precedence settings used 'all', replacing lower-precedence settings")
        return high_prec

    logger.debug(f"Overlaying {len(high_prec.explicit_settings)} explicit setting(s)")
    return high_prec.fold(lambda kind, setting, acc: acc.set_enabled(kind, setting), low_prec)
