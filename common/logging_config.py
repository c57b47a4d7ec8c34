import logging
import os
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def resolve_log_level(log_level: Optional[str] = None) -> int:
    """
    Translate a level name into a logging level.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL env var or INFO

    Returns:
        Numeric logging level, INFO for unknown names
    """
    if log_level is None:
        log_level = os.getenv('LOG_LEVEL', 'INFO')
    return getattr(logging, log_level.upper(), logging.INFO)


def setup_logging(component_name: str, log_level: Optional[str] = None) -> logging.Logger:
    """
    Set up logging configuration for a component.

    Engine modules log under the ``splitter`` package, so that logger gets
    a handler too. It keeps propagating so test harnesses can capture it.

    Args:
        component_name: Name of the component (e.g., 'cli')
        log_level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL env var or INFO

    Returns:
        Configured logger instance
    """
    level = resolve_log_level(log_level)

    logger = logging.getLogger(component_name)
    for name in (component_name, 'splitter'):
        target = logging.getLogger(name)
        target.setLevel(level)

        if target.handlers:
            for handler in target.handlers:
                handler.setLevel(level)
            continue

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

        target.addHandler(handler)
        if name == component_name:
            target.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
