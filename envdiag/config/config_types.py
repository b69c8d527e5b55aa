# envdiag/config/config_types.py
"""Configuration type definitions."""

from enum import Enum
import logging


class FieldKind(str, Enum):
    """Structural kind of a schema field."""

    SCALAR = "scalar"
    NESTED = "nested"
    OPTIONAL_NESTED = "optional_nested"

    @property
    def is_nested(self) -> bool:
        """Check if the field holds a child structure."""
        return self in (FieldKind.NESTED, FieldKind.OPTIONAL_NESTED)

    def __str__(self) -> str:
        return self.value


class EnvLogLevel(str, Enum):
    """
    Supported log levels.

    Inherits from str so values compare and print as plain strings.

    Examples:
        >>> EnvLogLevel.INFO
        <EnvLogLevel.INFO: 'INFO'>
        >>> str(EnvLogLevel.INFO)
        'INFO'
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def level(self) -> int:
        """Get numeric logging level for stdlib logging module."""
        return getattr(logging, self.value)

    def __str__(self) -> str:
        return self.value


__all__ = [
    "FieldKind",
    "EnvLogLevel",
]
