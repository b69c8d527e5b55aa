# envdiag/config/env_source.py
"""
Read-only environment sources.

Every component that looks up a variable goes through an object with a
single ``get(key)`` method, so tests and embedders can supply their own
table instead of touching the process environment.
"""
import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Protocol, Union

from dotenv import dotenv_values


class EnvSource(Protocol):
    def get(self, key: str) -> Optional[str]: ...


class OsEnvironment:
    """Live view of ``os.environ``."""

    def get(self, key: str) -> Optional[str]:
        return os.environ.get(key)

    def __repr__(self) -> str:
        return "OsEnvironment()"


class MappingEnvironment:
    """Environment backed by a plain mapping."""

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(values or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def __repr__(self) -> str:
        return f"MappingEnvironment(keys={sorted(self._values)})"


class DotenvEnvironment:
    """
    Environment read from a ``.env`` file.

    Args:
        path: Location of the dotenv file
        override: If True, file values win over the process environment.
                  If False, the process environment wins and the file only
                  fills gaps.
        include_os: Layer the process environment at all
    """

    def __init__(
        self,
        path: Union[str, Path] = ".env",
        override: bool = False,
        include_os: bool = True,
    ) -> None:
        self._path = Path(path)
        self._override = override
        self._include_os = include_os
        # Keys declared without a value ("FOO" with no "=") come back as None
        self._values: Dict[str, str] = {
            k: v for k, v in dotenv_values(self._path).items() if v is not None
        }

    def get(self, key: str) -> Optional[str]:
        if not self._include_os:
            return self._values.get(key)
        if self._override and key in self._values:
            return self._values[key]
        value = os.environ.get(key)
        if value is None:
            return self._values.get(key)
        return value

    def __repr__(self) -> str:
        return f"DotenvEnvironment(path={str(self._path)!r}, override={self._override})"


def get_env(
    name: str, default: Optional[str] = None, source: Optional[EnvSource] = None
) -> Optional[str]:
    """
    Get Env variable with optional default
    """
    value = (source or OsEnvironment()).get(name)
    return default if value is None else value


__all__ = [
    "EnvSource",
    "OsEnvironment",
    "MappingEnvironment",
    "DotenvEnvironment",
    "get_env",
]
