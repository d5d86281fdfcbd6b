"""Utility functions for contact-reminders."""

import sys
from pathlib import Path
from typing import Any, List, Optional

from loguru import logger


def setup_logging(
    env: str = "dev",
    log_file: Optional[Path] = None,
    log_level: str = "INFO",
    console: bool = True,
) -> None:
    """
    Configure logging for the application.

    Args:
        env: Environment name; no log file is written for "test"
        log_file: Path of the rotating log file
        log_level: Minimum level for all sinks
        console: Whether to log to stderr
    """
    logger.remove()

    if console:
        logger.add(sys.stderr, level=log_level, backtrace=True, diagnose=True, colorize=True)

    if log_file and env != "test":
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_file),
            level=log_level,
            rotation="10 MB",
            retention="10 days",
            backtrace=True,
            diagnose=True,
            enqueue=True,
            colorize=False,
        )

    logger.debug(f"Logging initialized env={env} level={log_level} file={log_file}")


def parse_tags(tags: Any) -> List[str]:
    """Parse tags from a list or a comma separated string.

    Leading '#' characters are dropped so "#person" and "person" match.
    """
    if tags is None:
        return []
    if isinstance(tags, (list, tuple, set)):
        raw = [str(t) for t in tags]
    else:
        raw = str(tags).split(",")
    return [t.strip().lstrip("#") for t in raw if t.strip().lstrip("#")]
