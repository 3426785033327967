"""lint-settings: resolve ordered lint directives into lint settings."""

from lint_settings.__version__ import __version__
from lint_settings.exceptions import (
    AllNotFirstError,
    InvalidLintRuleError,
    InvalidSettingError,
    LintSettingsError,
    MalformedRuleError,
    RedundantSettingError,
)
from lint_settings.kinds import LintKind, kinds_of_string, string_of_kind
from lint_settings.location import Loc, Position
from lint_settings.parser import of_lines
from lint_settings.settings import (
    LintSetting,
    LintSettings,
    all_setting,
    default_settings,
    merge,
    strip_locations,
)

__all__ = [
    "__version__",
    "LintKind",
    "kinds_of_string",
    "string_of_kind",
    "Loc",
    "Position",
    "LintSetting",
    "LintSettings",
    "default_settings",
    "all_setting",
    "strip_locations",
    "merge",
    "of_lines",
    "LintSettingsError",
    "MalformedRuleError",
    "InvalidSettingError",
    "InvalidLintRuleError",
    "AllNotFirstError",
    "RedundantSettingError",
]
