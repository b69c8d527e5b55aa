# envdiag/binder.py
"""
Default binder: copies environment values onto a configuration model.

Behaves like a fail-fast environment binder. The first required key with
no value and no default stops binding with RequiredKeyAbsentError; the
processor in front of it turns that into a complete report.
"""
from functools import lru_cache
import types
import typing
from typing import Any, Optional

from pydantic import BaseModel, TypeAdapter, ValidationError

from envdiag.api_error import (
    InvalidSpecificationError,
    ParseError,
    RequiredKeyAbsentError,
)
from envdiag.config.env_source import EnvSource, OsEnvironment
from envdiag.schema import Schema, effective_key, join_key, schema_for

_sequence_origins = (list, tuple, set, frozenset)
_union_origins = tuple(
    origin for origin in (typing.Union, getattr(types, "UnionType", None)) if origin is not None
)


@lru_cache(maxsize=None)
def _adapter_for(annotation: Any) -> TypeAdapter:
    return TypeAdapter(annotation)


def unwrap_optional(annotation: Any) -> Any:
    """Return X for Optional[X] and X | None, anything else unchanged."""
    if typing.get_origin(annotation) in _union_origins:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def type_name(annotation: Any) -> str:
    annotation = unwrap_optional(annotation)
    if typing.get_args(annotation):
        return str(annotation).replace("typing.", "")
    return getattr(annotation, "__name__", None) or str(annotation).replace("typing.", "")


def resolve_schema(target: Any, schema: Optional[Schema] = None) -> Schema:
    """
    Find the schema describing ``target``.

    Raises:
        InvalidSpecificationError: If target is not a model instance, or no
            schema was given or registered for its class
    """
    if not isinstance(target, BaseModel):
        raise InvalidSpecificationError()
    if target.model_config.get("frozen"):
        raise InvalidSpecificationError(
            f"{type(target).__name__} is frozen and cannot be bound in place"
        )
    if schema is None:
        schema = schema_for(type(target))
        if schema is None:
            raise InvalidSpecificationError(
                f"no schema registered for {type(target).__name__}"
            )
    elif not isinstance(target, schema.config_class):
        raise InvalidSpecificationError(
            f"schema describes {schema.config_class.__name__}, "
            f"got {type(target).__name__}"
        )
    return schema


def convert(raw: str, annotation: Any) -> Any:
    """
    Convert a raw environment string to ``annotation``.

    Sequence types are read as comma-separated lists.
    """
    value: Any = raw
    inner = unwrap_optional(annotation)
    if typing.get_origin(inner) in _sequence_origins or inner in _sequence_origins:
        value = [part.strip() for part in raw.split(",")] if raw else []
    return _adapter_for(annotation).validate_python(value)


def _assign(target: BaseModel, name: str, value: Any) -> None:
    try:
        setattr(target, name, value)
    except ValidationError as exc:
        # Frozen models, or validate_assignment rejecting the value
        raise InvalidSpecificationError(
            f"cannot assign {name} on {type(target).__name__}: {exc}"
        ) from exc


class Binder:
    """Binds an environment source onto configuration models in place."""

    def __init__(self, environ: Optional[EnvSource] = None) -> None:
        self._environ = environ or OsEnvironment()

    @property
    def environ(self) -> EnvSource:
        return self._environ

    def bind(self, prefix: str, target: Any, schema: Optional[Schema] = None) -> None:
        """
        Populate ``target`` from the environment.

        Args:
            prefix: Namespace prefix, may be empty
            target: Model instance to mutate
            schema: Field table, looked up by target type when omitted

        Raises:
            InvalidSpecificationError: If target cannot be bound
            RequiredKeyAbsentError: On the first required key with no value
            ParseError: If a value cannot be converted
        """
        schema = resolve_schema(target, schema)
        self._bind_struct(prefix, schema, target)

    def _bind_struct(self, prefix: str, schema: Schema, target: BaseModel) -> None:
        for spec in schema.fields:
            if spec.kind.is_nested:
                child = getattr(target, spec.name, None)
                if child is None:
                    child = spec.child.zero_value()
                    _assign(target, spec.name, child)
                self._bind_struct(join_key(prefix, spec.key), spec.child, child)
                continue

            key = effective_key(prefix, spec.key or spec.name)
            raw = self._environ.get(key)
            if raw is None:
                if spec.default is None:
                    if spec.required:
                        raise RequiredKeyAbsentError(key, field=spec.name)
                    continue
                raw = spec.default

            annotation = schema.annotation_of(spec.name)
            try:
                value = convert(raw, annotation)
            except ValidationError as exc:
                raise ParseError(
                    key=key,
                    field=spec.name,
                    type_name=type_name(annotation),
                    value=raw,
                    err=exc,
                ) from exc
            _assign(target, spec.name, value)


__all__ = ["Binder", "resolve_schema", "convert", "type_name", "unwrap_optional"]
