"""Logging setup shared by the Lambda handler and the CLI."""
import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def resolve_level(name: Optional[str], default: int = logging.INFO) -> int:
    """
    Translate a level name such as "debug" into its logging constant.

    Unknown or empty names resolve to default.
    """
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(level: Optional[int] = None, force: bool = False) -> None:
    """
    Send log records to stdout, where Lambda forwards them to CloudWatch.

    Args:
        level: Logging level. Falls back to LOG_LEVEL, then INFO.
        force: Replace handlers installed earlier (the Lambda runtime adds its own).
    """
    global _configured

    if _configured and not force:
        return

    logging.basicConfig(
        level=level if level is not None else resolve_level(os.getenv("LOG_LEVEL")),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=force,
    )
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger for name, configuring logging on first use."""
    setup_logging()
    return logging.getLogger(name)
