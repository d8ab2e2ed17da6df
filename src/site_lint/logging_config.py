"""Logging configuration for site-lint.

Lint diagnostics are part of the report on stdout. Logging covers the
run itself (files found, syntax checks started, decoding fallbacks) and
always goes to stderr.
"""
import logging
import sys

LOGGER_NAMESPACE = "site_lint"

DEFAULT_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_FORMAT = "%(levelname)s [%(name)s]: %(message)s"


def resolve_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI logging flags to a level.

    Raises:
        ValueError: If both flags are set
    """
    if verbose and quiet:
        raise ValueError("--verbose and --quiet cannot be used together")
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the ``site_lint`` logger.

    Verbose output names the module each message comes from.

    Args:
        verbose: Enable verbose (INFO level) logging
        quiet: Only log errors
    """
    level = resolve_level(verbose=verbose, quiet=quiet)

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(VERBOSE_FORMAT if verbose else DEFAULT_FORMAT))
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get logger for module.

    Args:
        name: Module name (will be prefixed with 'site_lint.')

    Returns:
        Logger instance
    """
    if not name.startswith(f"{LOGGER_NAMESPACE}."):
        name = f"{LOGGER_NAMESPACE}.{name}"
    return logging.getLogger(name)
