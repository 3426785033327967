"""Report formatting and output."""
import json

from lint_settings.exceptions import LintSettingsError
from lint_settings.kinds import ALL_KINDS, string_of_kind
from lint_settings.settings import LintSettings
from lint_settings.types import ResolvedLint, SettingsReport


def build_report(settings: LintSettings) -> SettingsReport:
    """Describe the resolved state of every lint kind.

    Args:
        settings: Resolved lint settings

    Returns:
        Report with one entry per lint kind, in canonical order
    """
    lints: list[ResolvedLint] = [
        {
            "kind": string_of_kind(kind),
            "enabled": settings.is_enabled(kind),
            "explicit": kind in settings.explicit_settings,
        }
        for kind in ALL_KINDS
    ]

    return {
        "default": settings.get_default(),
        "all_encountered": settings.all_encountered,
        "lints": lints,
    }


def format_detailed_report(settings: LintSettings) -> str:
    """Format resolved settings as a human-readable report.

    Args:
        settings: Resolved lint settings

    Returns:
        Formatted report string
    """
    report = build_report(settings)

    lines = []
    lines.append("=" * 70)
    lines.append("LINT SETTINGS")
    lines.append("=" * 70)
    lines.append("")

    for lint in report["lints"]:
        state = "[ON ]" if lint["enabled"] else "[OFF]"
        source = "explicit" if lint["explicit"] else "default"
        lines.append(f"{state} {lint['kind']} ({source})")

    lines.append("")
    lines.append(f"Default for unlisted lints: {'on' if report['default'] else 'off'}")
    lines.append("")

    return "\n".join(lines)


def format_json_report(settings: LintSettings) -> str:
    """Format resolved settings as JSON.

    Args:
        settings: Resolved lint settings

    Returns:
        JSON string
    """
    return json.dumps(build_report(settings), indent=2)


def format_error(error: LintSettingsError) -> str:
    """Format a resolution error with the label of the offending line."""
    return f"Error in {error.label}: {error.message}"


def get_exit_code(error: LintSettingsError | None) -> int:
    """Get exit code based on resolution outcome.

    Args:
        error: Resolution error, or None if resolution succeeded

    Returns:
        0 if settings resolved, 1 if a directive was rejected
    """
    return 0 if error is None else 1
