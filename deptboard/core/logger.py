# deptboard/core/logger.py
import logging
import sys

from deptboard.core.config import CONFIG


def resolve_level(name: str) -> int:
    """Map a configured level name to a logging level, INFO when unrecognised."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else logging.INFO


_logger = logging.getLogger("deptboard")
if not _logger.handlers:
    _logger.setLevel(resolve_level(CONFIG.LOG_LEVEL))
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    _logger.addHandler(handler)


def get_logger(name: str | None = None) -> logging.Logger:
    if name:
        return _logger.getChild(name)
    return _logger
