"""Type definitions for lint-settings reports."""
from typing import TypedDict


class ResolvedLint(TypedDict):
    """Resolved state of a single lint kind."""

    kind: str
    enabled: bool
    explicit: bool


class SettingsReport(TypedDict):
    """Resolved state of every lint kind."""

    default: bool
    all_encountered: bool
    lints: list[ResolvedLint]
