"""
Configuration for reporting and logging.

Reporting settings are plain immutable values. Logging is configured once by
the demonstration entry point; library code only creates module loggers.
"""

import logging
import os

from attrs import frozen

LOG_LEVEL_ENV_VAR = "COMPOSITETREE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@frozen
class ReportConfig:
    """How the client reports operation results."""

    prefix: str = "Resultado"

    def format_result(self, result: str) -> str:
        return f"{self.prefix}: {result}"


def resolve_log_level(level: str | int | None = None) -> int:
    """
    Resolve a logging level from an explicit value or the environment.

    Params:
        level: Level name or number; when None the environment variable is read

    Returns:
        Numeric logging level

    Raises:
        ValueError: If the level name is not a known logging level
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def configure_logging(level: str | int | None = None) -> None:
    """Install a basic console handler at the resolved level."""
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)
