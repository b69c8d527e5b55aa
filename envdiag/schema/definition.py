# envdiag/schema/definition.py
"""
Declarative description of a configuration type.

A Schema pairs a pydantic model class with the ordered list of fields that
are read from the environment. Field order is the order in which missing
variables are reported.
"""
from __future__ import annotations

import threading
from typing import Dict, Optional, Tuple, Type

from pydantic import BaseModel, Field, model_validator

from envdiag.api_error import SchemaError
from envdiag.config.config_types import FieldKind


class FieldSpec(BaseModel):
    """
    Environment metadata for one attribute of a configuration model.

    `required` and `default` are independent: a default only changes what
    the binder does when the key is absent.
    """

    name: str = Field(..., min_length=1, description="Attribute name on the model")
    kind: FieldKind = FieldKind.SCALAR
    key: str = Field(default="", description="Key fragment, empty for none")
    required: bool = False
    default: Optional[str] = None
    child: Optional[Schema] = None
    description: Optional[str] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_shape(self) -> "FieldSpec":
        if self.kind.is_nested and self.child is None:
            raise ValueError(f"{self.kind} field {self.name!r} needs a child schema")
        if not self.kind.is_nested and self.child is not None:
            raise ValueError(f"scalar field {self.name!r} cannot have a child schema")
        if self.kind == FieldKind.SCALAR and self.required and not self.key:
            raise ValueError(
                f"required field {self.name!r} declares no environment key"
            )
        return self


class Schema(BaseModel):
    """Ordered field table for a pydantic configuration model."""

    config_class: Type[BaseModel]
    fields: Tuple[FieldSpec, ...] = ()

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_fields(self) -> "Schema":
        model_fields = self.config_class.model_fields
        seen = set()
        for spec in self.fields:
            if spec.name in seen:
                raise ValueError(f"duplicate field {spec.name!r}")
            seen.add(spec.name)
            if spec.name not in model_fields:
                raise ValueError(
                    f"{self.config_class.__name__} has no field {spec.name!r}"
                )
        return self

    def zero_value(self) -> BaseModel:
        """Instance of the model holding only its declared defaults, unvalidated."""
        return self.config_class.model_construct()

    def annotation_of(self, name: str) -> object:
        return self.config_class.model_fields[name].annotation


FieldSpec.model_rebuild()


_registry: Dict[type, Schema] = {}
_registry_lock = threading.Lock()


def _build(build, *args, **kwargs):
    # Pydantic validation failures become SchemaError so callers only need one except clause
    try:
        return build(*args, **kwargs)
    except ValueError as exc:
        if isinstance(exc, SchemaError):
            raise
        raise SchemaError(str(exc)) from exc


def scalar(
    name: str,
    key: str = "",
    required: bool = False,
    default: Optional[str] = None,
    description: Optional[str] = None,
) -> FieldSpec:
    """Declare a scalar field read from a single variable."""
    return _build(
        FieldSpec,
        name=name,
        kind=FieldKind.SCALAR,
        key=key,
        required=required,
        default=default,
        description=description,
    )


def nested(name: str, key: str, child: Schema) -> FieldSpec:
    """Declare an always-present child structure under ``key``."""
    return _build(FieldSpec, name=name, kind=FieldKind.NESTED, key=key, child=child)


def optional_nested(name: str, key: str, child: Schema) -> FieldSpec:
    """Declare a child structure whose attribute may be None."""
    return _build(
        FieldSpec, name=name, kind=FieldKind.OPTIONAL_NESTED, key=key, child=child
    )


def define_schema(config_class: Type[BaseModel], *fields: FieldSpec) -> Schema:
    """
    Build a schema and register it for ``config_class``.

    Registered schemas are found by type, so ``process(prefix, cfg)`` does
    not need the schema passed explicitly.

    Raises:
        SchemaError: If the field table does not match the model
    """
    schema = _build(Schema, config_class=config_class, fields=fields)
    with _registry_lock:
        _registry[config_class] = schema
    return schema


def schema_for(config_class: type) -> Optional[Schema]:
    """Look up the schema of a model class, or of its nearest registered base."""
    for klass in getattr(config_class, "__mro__", ()):
        schema = _registry.get(klass)
        if schema is not None:
            return schema
    return None


__all__ = [
    "FieldSpec",
    "Schema",
    "scalar",
    "nested",
    "optional_nested",
    "define_schema",
    "schema_for",
]
