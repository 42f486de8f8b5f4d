"""Logging helpers for forge-bindings command line."""

import logging
from typing import Union


def parse_log_level(value: Union[str, int, None], default: int = logging.INFO) -> int:
    """
    Convert a level name or number to a logging level.

    Args:
        value: e.g. "DEBUG", "warning", "10", or None
        default: Level used when value is empty or unknown

    Returns:
        Numeric logging level
    """
    if value is None or value == "":
        return default
    if isinstance(value, int):
        return value
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int = logging.INFO) -> None:
    """Configure default logging if no handlers are present."""
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler()],
    )
