"""Lint kind vocabulary and name resolution."""
from enum import Enum


class LintKind(Enum):
    """Closed set of lint kinds, in canonical order."""

    SKETCHY_NULL_BOOL = "sketchy-null-bool"
    SKETCHY_NULL_STRING = "sketchy-null-string"
    SKETCHY_NULL_NUMBER = "sketchy-null-number"
    SKETCHY_NULL_MIXED = "sketchy-null-mixed"


ALL_KINDS: tuple[LintKind, ...] = tuple(LintKind)

# Group aliases expand to several concrete kinds
GROUP_ALIASES: dict[str, tuple[LintKind, ...]] = {
    "sketchy-null": (
        LintKind.SKETCHY_NULL_BOOL,
        LintKind.SKETCHY_NULL_STRING,
        LintKind.SKETCHY_NULL_NUMBER,
        LintKind.SKETCHY_NULL_MIXED,
    ),
}

_KIND_ORDER = {kind: index for index, kind in enumerate(ALL_KINDS)}


def kind_order(kind: LintKind) -> int:
    """Return the position of a kind in canonical order."""
    return _KIND_ORDER[kind]


def string_of_kind(kind: LintKind) -> str:
    """Get the directive name of a lint kind.

    Args:
        kind: Lint kind

    Returns:
        Name used in directives, e.g. "sketchy-null-bool"
    """
    return kind.value


def kinds_of_string(name: str) -> list[LintKind] | None:
    """Resolve a directive key to the lint kinds it names.

    Args:
        name: Lint kind name or group alias

    Returns:
        List of kinds in canonical order, or None if the name is unknown
    """
    if name in GROUP_ALIASES:
        return list(GROUP_ALIASES[name])

    try:
        return [LintKind(name)]
    except ValueError:
        return None
