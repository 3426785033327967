"""Command-line interface for lint-settings."""
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from lint_settings.__version__ import __version__
from lint_settings.config import DEFAULT_CONFIG_NAME, load_config
from lint_settings.exceptions import LintSettingsError
from lint_settings.logging_config import get_logger, setup_logging
from lint_settings.parser import of_lines
from lint_settings.reporter import (
    format_detailed_report,
    format_error,
    format_json_report,
    get_exit_code,
)
from lint_settings.settings import merge


def split_cli_lints(lints: str) -> list[tuple[str, str]]:
    """Split a comma-separated --lints value into labeled directives."""
    return [
        (f"--lints:{position}", line)
        for position, line in enumerate(lints.split(","), start=1)
    ]


@click.command()
@click.version_option(version=__version__, prog_name="lint-settings")
@click.option("--config", type=click.Path(exists=True), help="Path to config file")
@click.option("--lints", type=str, help="Comma-separated directives overriding the config")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", is_flag=True, help="Suppress warnings (errors only)")
@click.option("--debug", is_flag=True, help="Trace every resolved directive")
def main(
    config: str | None,
    lints: str | None,
    output_json: bool,
    verbose: bool,
    quiet: bool,
    debug: bool,
) -> None:
    """Resolve lint directives and show which lints are enabled."""
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)
    logger = get_logger(__name__)

    config_path = Path(config) if config else Path.cwd() / DEFAULT_CONFIG_NAME

    try:
        cfg = load_config(config_path)
        config_lines = list(cfg.labeled_lines())
        logger.info(f"Loaded {len(config_lines)} lint directive(s) from {config_path}")

        settings = of_lines(config_lines)
        if lints:
            settings = merge(settings, of_lines(split_cli_lints(lints)))

    except LintSettingsError as e:
        click.echo(format_error(e), err=True)
        sys.exit(get_exit_code(e))
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(130)
    except (ValueError, ValidationError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except Exception as e:
        logger.exception("Unexpected error while resolving lint settings")
        click.echo(
            f"An unexpected error occurred: {e}\n" "Run with --verbose for details.", err=True
        )
        sys.exit(2)

    if output_json:
        output = format_json_report(settings)
    else:
        output = format_detailed_report(settings)

    click.echo(output)
    sys.exit(get_exit_code(None))


if __name__ == "__main__":
    main()
