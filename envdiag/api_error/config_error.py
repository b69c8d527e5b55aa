# envdiag/api_error/config_error.py
import json
from dataclasses import dataclass
from typing import List, Sequence

_header = "configuration error:"


@dataclass(frozen=True)
class MissingEnvError:
    """A required environment variable that has no value."""

    struct_field: str
    env_key: str

    def __str__(self) -> str:
        # Quotes and backslashes in the key are escaped
        return f"missing required environment variable {json.dumps(self.env_key, ensure_ascii=False)}"


class ConfigurationError(RuntimeError):
    """
    Raised when configuration is invalid or incomplete.
    """

    def __init__(self, message: str, missing: Sequence[MissingEnvError] = ()):
        self.missing: List[MissingEnvError] = list(missing)
        super().__init__(message)

    @classmethod
    def from_missing(cls, missing: Sequence[MissingEnvError]) -> "ConfigurationError":
        """
        Build the combined report for every missing variable.

        The header is followed by one tab-indented line per entry, in the
        order given, with no trailing newline.
        """
        lines = "\n\t".join(str(entry) for entry in missing)
        return cls(f"{_header}\n\t{lines}", missing=missing)


__all__ = ["MissingEnvError", "ConfigurationError"]
