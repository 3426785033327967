"""Errors raised while resolving lint directives."""
from typing import Any


class LintSettingsError(ValueError):
    """A directive line could not be resolved.

    Attributes:
        label: Caller-supplied label of the offending line
        message: Human-readable description of the problem
    """

    def __init__(self, label: Any, message: str) -> None:
        super().__init__(message)
        self.label = label
        self.message = message


class MalformedRuleError(LintSettingsError):
    """Line does not contain exactly one '='."""

    def __init__(self, label: Any) -> None:
        super().__init__(
            label, "Malformed lint rule. Properly formed rules contain a single '=' character."
        )


class InvalidSettingError(LintSettingsError):
    """Value is neither on nor off."""

    def __init__(self, label: Any) -> None:
        super().__init__(label, "Invalid setting encountered. Valid settings are on and off.")


class InvalidLintRuleError(LintSettingsError):
    """Key is not a known lint kind or group alias."""

    def __init__(self, label: Any, rule: str) -> None:
        super().__init__(label, f'Invalid lint rule "{rule}" encountered.')
        self.rule = rule


class AllNotFirstError(LintSettingsError):
    """An "all" directive appeared after another directive."""

    def __init__(self, label: Any) -> None:
        super().__init__(
            label, '"all" is only allowed as the first setting. Settings are order-sensitive.'
        )


class RedundantSettingError(LintSettingsError):
    """Every value set by a directive was overwritten later."""

    def __init__(self, label: Any) -> None:
        super().__init__(
            label,
            "Redundant argument. The values set by this argument are completely overwritten.",
        )
