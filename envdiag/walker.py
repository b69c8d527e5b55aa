# envdiag/walker.py
"""
Completeness check over a configuration schema.

Unlike the binder, which stops at the first absent key, the walker visits
every field and returns all missing required variables in one pass.
"""
from typing import List

from pydantic import BaseModel

from envdiag.api_error import MissingEnvError
from envdiag.config.env_source import EnvSource
from envdiag.schema import Schema, effective_key, join_key


def find_missing(
    prefix: str, schema: Schema, current: BaseModel, environ: EnvSource
) -> List[MissingEnvError]:
    """
    Collect every required variable that has no value.

    Args:
        prefix: Accumulated namespace prefix, may be empty
        schema: Field table of ``current``
        current: Instance being checked, only read to follow nested values
        environ: Environment to look keys up in

    Returns:
        Missing variables in depth-first, declared-field order
    """
    missing: List[MissingEnvError] = []

    for spec in schema.fields:
        if spec.kind.is_nested:
            child = getattr(current, spec.name, None)
            if child is None:
                # Unset optional container: its required children still count
                child = spec.child.zero_value()
            missing.extend(
                find_missing(join_key(prefix, spec.key), spec.child, child, environ)
            )
            continue

        if spec.required and spec.key:
            env_key = effective_key(prefix, spec.key)
            if not environ.get(env_key):
                missing.append(MissingEnvError(struct_field=spec.name, env_key=env_key))

    return missing


__all__ = ["find_missing"]
