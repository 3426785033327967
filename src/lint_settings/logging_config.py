"""Logging configuration for lint-settings."""
import logging
import sys

PACKAGE_LOGGER = "lint_settings"

MESSAGE_FORMAT = "%(levelname)s: %(message)s"
# Directive traces come from several modules, so name the source
DEBUG_FORMAT = "%(levelname)s [%(name)s]: %(message)s"


def resolve_level(verbose: bool = False, quiet: bool = False, debug: bool = False) -> int:
    """Pick the log level for the given flags.

    quiet wins over debug, which wins over verbose.

    Args:
        verbose: Report loaded config and rejected directives (INFO)
        quiet: Only report errors (ERROR)
        debug: Trace every resolved directive and merge (DEBUG)

    Returns:
        Logging level
    """
    if quiet:
        return logging.ERROR
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False, debug: bool = False) -> None:
    """Send lint_settings records to stderr at the level the flags select.

    Calling it again replaces the previous handler.
    """
    level = resolve_level(verbose=verbose, quiet=quiet, debug=debug)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.propagate = False
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DEBUG_FORMAT if debug else MESSAGE_FORMAT))
    package_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get the logger for a module, nested under lint_settings.

    Args:
        name: Module name; prefixed with 'lint_settings.' unless already inside it

    Returns:
        Logger instance
    """
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
