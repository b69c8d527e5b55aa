# envdiag/api_error/bind_error.py
from typing import Optional


class EnvConfigError(Exception):
    """Base error for all envdiag-specific issues."""

    def __init__(self, message: str, code: str = "ENVCONFIG_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class BindError(EnvConfigError):
    """Raised by a binder when the environment cannot be bound onto a target."""

    def __init__(self, message: str, code: str = "BIND_ERROR"):
        super().__init__(message, code=code)


class InvalidSpecificationError(BindError):
    """Target is not a bindable configuration instance."""

    def __init__(self, message: str = "specification must be a configuration model instance"):
        super().__init__(message, code="INVALID_SPECIFICATION")


class RequiredKeyAbsentError(BindError):
    """
    A required key with no default had no value in the environment.

    Binders raise this on the first such key they meet.
    """

    def __init__(self, key: str, field: Optional[str] = None):
        self.key = key
        self.field = field
        super().__init__(f"required key {key} missing value", code="REQUIRED_KEY_ABSENT")


class ParseError(BindError):
    """A raw environment value could not be converted to the field's type."""

    def __init__(self, key: str, field: str, type_name: str, value: str, err: Exception):
        self.key = key
        self.field = field
        self.type_name = type_name
        self.value = value
        self.err = err
        super().__init__(
            f"assigning {key} to {field}: converting '{value}' to type {type_name}. "
            f"details: {err}",
            code="PARSE_ERROR",
        )


class SchemaError(EnvConfigError, ValueError):
    """Raised when a configuration schema is defined incorrectly."""

    def __init__(self, message: str):
        super().__init__(message, code="SCHEMA_ERROR")


__all__ = [
    "EnvConfigError",
    "BindError",
    "InvalidSpecificationError",
    "RequiredKeyAbsentError",
    "ParseError",
    "SchemaError",
]
