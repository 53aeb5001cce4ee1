"""Observability utilities: logging setup.

This module configures standard logging and `structlog` for structured logs.
Logs always go to stderr: a check's stdout is its result.
"""

from __future__ import annotations

import logging
import sys

import structlog

# AWS SDK loggers are chatty at INFO; keep them quiet unless debugging
_SDK_LOGGERS = ["boto3", "botocore", "urllib3", "s3transfer"]


def resolve_level(
    explicit: str | None = None, verbose: int = 0, env_level: str | None = None
) -> str:
    """Pick the effective level name.

    ``explicit`` (``--log-level``) wins, then DEBUG for ``-v``, then the
    environment value, then WARNING.
    """
    if explicit:
        return explicit.upper()
    if verbose:
        return "DEBUG"
    if env_level:
        return env_level.upper()
    return "WARNING"


def setup_logging(level: str = "WARNING", sdk_debug: bool = False) -> None:
    """Configure application logging.

    Parameters
    ----------
    level: str
        Logging level name (e.g., "DEBUG", "INFO"). Defaults to "WARNING".
    sdk_debug: bool
        Also let the AWS SDK loggers through at DEBUG.

    Behavior
    --------
    - Initializes Python's logging with the requested level on stderr.
    - Configures structlog with a filtering bound logger at the same level.
    - Keeps the AWS SDK loggers at WARNING unless ``sdk_debug`` is set and
      the level is DEBUG.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format=("%(asctime)s %(levelname)s %(name)s - %(message)s"),
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stderr,
    )

    if sdk_debug and numeric_level <= logging.DEBUG:
        sdk_level = logging.DEBUG
    else:
        sdk_level = logging.WARNING
    for logger_name in _SDK_LOGGERS:
        logging.getLogger(logger_name).setLevel(sdk_level)

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
