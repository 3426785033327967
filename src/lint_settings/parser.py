"""Resolution of ordered lint directives into lint settings."""
from dataclasses import dataclass
from typing import Any, Iterable

from lint_settings.exceptions import (
    AllNotFirstError,
    InvalidLintRuleError,
    InvalidSettingError,
    LintSettingsError,
    MalformedRuleError,
    RedundantSettingError,
)
from lint_settings.kinds import LintKind, kinds_of_string
from lint_settings.location import Loc, loc_of_line
from lint_settings.logging_config import get_logger
from lint_settings.settings import (
    LintSetting,
    LintSettings,
    all_setting,
    default_settings,
    strip_locations,
)

logger = get_logger(__name__)

ALL_KEYWORD = "all"
SETTING_VALUES = {"on": True, "off": False}


@dataclass(frozen=True)
class BulkAll:
    """An "all=on" or "all=off" directive."""

    enabled: bool


@dataclass(frozen=True)
class Entries:
    """A directive setting one or more kinds to the same value."""

    kinds: list[LintKind]
    setting: LintSetting


ParsedLine = BulkAll | Entries


@dataclass(frozen=True)
class LocatedLine:
    """A directive line paired with its label and synthetic location."""

    loc: Loc
    label: Any
    text: str


def parse_value(label: Any, value: str) -> bool:
    """Parse the right-hand side of a directive.

    Raises:
        InvalidSettingError: If value is not "on" or "off"
    """
    if value not in SETTING_VALUES:
        raise InvalidSettingError(label)
    return SETTING_VALUES[value]


def parse_line(loc: Loc, label: Any, line: str) -> ParsedLine:
    """Parse a single directive line.

    Args:
        loc: Location assigned to the line
        label: Caller-supplied label used for error attribution
        line: Directive text, e.g. "sketchy-null=off"

    Returns:
        BulkAll for "all=..." directives, Entries otherwise

    Raises:
        MalformedRuleError: If the line does not contain exactly one '='
        InvalidSettingError: If the value is not "on" or "off"
        InvalidLintRuleError: If the key is not a known lint kind or alias
    """
    parts = line.split("=")
    if len(parts) != 2:
        raise MalformedRuleError(label)

    key = parts[0].strip()
    value = parse_value(label, parts[1].strip())

    if key == ALL_KEYWORD:
        return BulkAll(enabled=value)

    kinds = kinds_of_string(key)
    if kinds is None:
        raise InvalidLintRuleError(label, key)

    return Entries(kinds=kinds, setting=LintSetting(enabled=value, loc=loc))


def locate_lines(lines: Iterable[tuple[Any, str]]) -> list[LocatedLine]:
    """Pair each (label, text) line with the location of its input position."""
    return [
        LocatedLine(loc=loc_of_line(index), label=label, text=text)
        for index, (label, text) in enumerate(lines)
    ]


def resolve(located_lines: list[LocatedLine]) -> LintSettings:
    """Fold located lines into settings, keeping their locations.

    Raises:
        LintSettingsError: On the first line that fails to parse, or on an
            "all" directive that is not the first line
    """
    settings = default_settings()

    for index, line in enumerate(located_lines):
        parsed = parse_line(line.loc, line.label, line.text)

        if isinstance(parsed, BulkAll):
            # Only valid while nothing has been folded in yet
            if index > 0:
                raise AllNotFirstError(line.label)
            settings = all_setting(parsed.enabled)
        else:
            settings = settings.set_all((kind, parsed.setting) for kind in parsed.kinds)

        logger.debug(f"Resolved lint directive {line.label}: {line.text.strip()}")

    return settings


def find_unused_line(
    settings: LintSettings, located_lines: list[LocatedLine]
) -> LocatedLine | None:
    """Find the first line none of whose settings survived resolution.

    Lines starting with "all" are never reported. The check is textual.

    Args:
        settings: Resolved settings, locations intact
        located_lines: Lines the settings were resolved from

    Returns:
        First unused line in input order, or None
    """

    def add_loc(_kind: LintKind, setting: LintSetting, acc: set[Loc]) -> set[Loc]:
        if setting.loc is not None:
            acc.add(setting.loc)
        return acc

    used_locs = settings.fold(add_loc, set())

    for line in located_lines:
        if line.loc in used_locs or line.text.strip().startswith(ALL_KEYWORD):
            continue
        return line

    return None


def of_lines(lines: Iterable[tuple[Any, str]]) -> LintSettings:
    """Resolve labeled directive lines into lint settings.

    Args:
        lines: Ordered (label, text) pairs; labels are only used in errors

    Returns:
        Resolved settings with all locations removed

    Raises:
        LintSettingsError: With the label of the offending line, if a line is
            malformed, names an unknown lint, misplaces "all", or is
            completely overwritten by later lines
    """
    located_lines = locate_lines(lines)

    try:
        settings = resolve(located_lines)

        unused = find_unused_line(settings, located_lines)
        if unused is not None:
            raise RedundantSettingError(unused.label)
    except LintSettingsError as e:
        logger.info(f"Lint directive {e.label} rejected: {e.message}")
        raise

    return strip_locations(settings)
