# envdiag/processor.py
"""
Drop-in front end for a binder with complete error reports.

    cfg = AppSettings()
    process("APP", cfg)

If several required variables are unset, the raised ConfigurationError
names all of them instead of only the first one the binder hit.
"""
from typing import Any, Optional, Protocol

from envdiag.api_error import ConfigurationError, RequiredKeyAbsentError
from envdiag.binder import Binder, resolve_schema
from envdiag.config.env_source import EnvSource, OsEnvironment
from envdiag.logger import get_app_logger
from envdiag.schema import Schema
from envdiag.walker import find_missing

logger = get_app_logger(__name__)


class SupportsBind(Protocol):
    def bind(self, prefix: str, target: Any, schema: Optional[Schema] = None) -> None: ...


class EnvProcessor:
    """
    Runs a binder and upgrades missing-key failures into a full report.

    Args:
        environ: Environment the walker checks; also handed to the default binder
        binder: Binder to delegate to. It should read the same environment.
    """

    def __init__(
        self,
        environ: Optional[EnvSource] = None,
        binder: Optional[SupportsBind] = None,
    ) -> None:
        self._environ = environ or OsEnvironment()
        self._binder = binder or Binder(self._environ)

    def process(self, prefix: str, target: Any, schema: Optional[Schema] = None) -> None:
        """
        Bind ``target`` from the environment.

        Raises:
            ConfigurationError: If required variables are missing, listing all of them
            BindError: Any other binder failure, unchanged
        """
        try:
            self._binder.bind(prefix, target, schema)
        except RequiredKeyAbsentError as err:
            logger.debug("required key absent, checking all fields", key=err.key, prefix=prefix)

            missing = find_missing(prefix, resolve_schema(target, schema), target, self._environ)
            if not missing:
                logger.warning(
                    "binder reported a missing key the walker could not find",
                    key=err.key,
                    prefix=prefix,
                )
                raise

            logger.debug(
                "configuration incomplete",
                prefix=prefix,
                missing=[entry.env_key for entry in missing],
            )
            raise ConfigurationError.from_missing(missing) from err


def process(
    prefix: str,
    target: Any,
    schema: Optional[Schema] = None,
    *,
    environ: Optional[EnvSource] = None,
    binder: Optional[SupportsBind] = None,
) -> None:
    """
    Bind ``target`` from the environment, reporting every missing variable.

    Args:
        prefix: Namespace prefix, may be empty
        target: Configuration model instance, mutated in place
        schema: Field table, looked up by target type when omitted
        environ: Environment source, the process environment by default
        binder: Binder to delegate to, the default Binder when omitted

    Raises:
        ConfigurationError: If required variables are missing
        BindError: Any other binder failure, unchanged
    """
    EnvProcessor(environ=environ, binder=binder).process(prefix, target, schema)


__all__ = ["EnvProcessor", "SupportsBind", "process"]
