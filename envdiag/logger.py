# envdiag/logger.py
"""
Library logger.

Usage:
    from envdiag.logger import get_app_logger

    logger = get_app_logger(__name__)
    logger.debug("binding configuration", prefix="APP")
"""
from typing import Any

from envdiag.config.structlog_config import get_logger as _get_structlog_logger


class AppLogger:
    """
    Named structlog front end.

    The structlog logger is looked up on every call, so whatever setup is
    active at that moment (the host's, envdiag's, or a test capture) is used.
    """

    def __init__(self, name: str = "envdiag"):
        self._name = name

    def _log(self, level: str, msg: str, **kwargs: Any) -> None:
        getattr(_get_structlog_logger(self._name), level)(msg, **kwargs)

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log("debug", msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._log("warning", msg, **kwargs)


def get_app_logger(name: str = "envdiag") -> AppLogger:
    """
    Get library logger instance.

    Args:
        name: Logger name

    Returns:
        AppLogger instance
    """
    return AppLogger(name)


__all__ = ["AppLogger", "get_app_logger"]
