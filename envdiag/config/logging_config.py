# envdiag/config/logging_config.py
from dataclasses import dataclass
from typing import Optional

from .config_types import EnvLogLevel
from .env_source import EnvSource, get_env
from envdiag.api_error import ConfigurationError

_default_log_level_env_key = "ENVDIAG_LOG_LEVEL"
_default_log_level = EnvLogLevel.WARNING


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    log_level: EnvLogLevel

    @property
    def level_value(self) -> str:
        """Get string value of log level."""
        return self.log_level.value

    @property
    def level_int(self) -> int:
        """Get numeric log level."""
        return self.log_level.level


def load_logging_config(
    log_level_env_key: str = _default_log_level_env_key,
    source: Optional[EnvSource] = None,
) -> LoggingConfig:
    """
    Load logging configuration from environment.

    Args:
        log_level_env_key: Environment variable name
        source: Environment to read from, the process environment by default

    Returns:
        LoggingConfig instance

    Raises:
        ConfigurationError: If the log level is invalid
    """
    raw = get_env(log_level_env_key, source=source) or _default_log_level.value

    try:
        return LoggingConfig(log_level=EnvLogLevel(raw.strip().upper()))

    except ValueError as exc:
        valid_levels = ", ".join(level.value for level in EnvLogLevel)

        raise ConfigurationError(
            f"Invalid logging configuration. "
            f"{log_level_env_key} must be one of [{valid_levels}], got {raw!r}"
        ) from exc


__all__ = [
    "LoggingConfig",
    "load_logging_config",
]
