# envdiag/config/structlog_config.py
"""
Structlog configuration module.

Host applications that set up structlog themselves keep their setup; the
library only configures structlog when nobody has. In that case the level
comes from ENVDIAG_LOG_LEVEL, and an unusable value falls back to WARNING
so logging can never fail a configuration load.
"""
import sys
import threading
from typing import Optional, Tuple
import structlog

from envdiag.api_error import ConfigurationError
from .logging_config import _default_log_level, load_logging_config

_lock = threading.Lock()
_configured_level: Optional[int] = None


def configure_structlog(log_level: int) -> None:
    """
    Configure structlog with the specified log level.

    Args:
        log_level: Numeric logging level (e.g., logging.INFO)

    Raises:
        RuntimeError: If already configured here with a different level
    """
    global _configured_level

    with _lock:
        if _configured_level is not None:
            if _configured_level == log_level:
                return
            raise RuntimeError(
                f"structlog already configured in this process. "
                f"Current level: {_configured_level}, attempted: {log_level}"
            )

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.processors.add_log_level,
                structlog.processors.StackInfoRenderer(),
                structlog.dev.set_exc_info,  # type: ignore[list-item]
                structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
                structlog.dev.ConsoleRenderer(
                    colors=True,
                    exception_formatter=structlog.dev.RichTracebackFormatter(
                        show_locals=False,
                        width=None,
                        suppress=["pydantic"],
                    ),
                ),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
            # reset_structlog() must reach loggers that were already handed out
            cache_logger_on_first_use=False,
        )
        _configured_level = log_level


def _level_from_env() -> Tuple[int, Optional[ConfigurationError]]:
    try:
        return load_logging_config().level_int, None
    except ConfigurationError as exc:
        return _default_log_level.level, exc


def get_logger(name: str = "envdiag") -> structlog.BoundLogger:
    """
    Get a structlog logger, configuring structlog first if nobody has.

    Args:
        name: Logger name
    """
    if _configured_level is None and not structlog.is_configured():
        level, problem = _level_from_env()
        configure_structlog(level)
        if problem is not None:
            structlog.get_logger(name).warning("ignoring log level setting", error=str(problem))
    return structlog.get_logger(name)


def is_configured() -> bool:
    """Check if envdiag configured structlog in this process."""
    return _configured_level is not None


def reset_structlog() -> None:
    """Forget the current configuration. FOR TESTING ONLY."""
    global _configured_level

    with _lock:
        _configured_level = None
        structlog.reset_defaults()


__all__ = [
    "configure_structlog",
    "get_logger",
    "is_configured",
    "reset_structlog",
]
