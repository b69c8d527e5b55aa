from typing import List, Optional

import pytest
from pydantic import BaseModel, Field

from envdiag import (
    Binder,
    InvalidSpecificationError,
    ParseError,
    RequiredKeyAbsentError,
    convert,
    define_schema,
    nested,
    optional_nested,
    scalar,
    type_name,
)


class ServerConfig(BaseModel):
    port: int = 0
    debug: bool = False
    hosts: List[str] = Field(default_factory=list)
    ids: List[int] = Field(default_factory=list)
    ratio: float = 0.0
    name: str = "unnamed"


SERVER_SCHEMA = define_schema(
    ServerConfig,
    scalar("port", "PORT", default="8080", description="Listen port"),
    scalar("debug", "DEBUG"),
    scalar("hosts", "HOSTS"),
    scalar("ids", "IDS"),
    scalar("ratio", "RATIO"),
    scalar("name"),
)


class Extras(BaseModel):
    colour: str = ""


class WithExtras(BaseModel):
    extras: Optional[Extras] = None


define_schema(
    WithExtras,
    optional_nested("extras", "EXTRAS", define_schema(Extras, scalar("colour", "COLOUR"))),
)


def test_bind_converts_scalar_types(make_env):
    env = make_env(
        {"DEBUG": "true", "HOSTS": "a, b,c", "IDS": "1,2", "RATIO": "0.5", "NAME": "api"}
    )
    cfg = ServerConfig()

    Binder(env).bind("", cfg)

    assert cfg.port == 8080
    assert cfg.debug is True
    assert cfg.hosts == ["a", "b", "c"]
    assert cfg.ids == [1, 2]
    assert cfg.ratio == 0.5
    assert cfg.name == "api"


def test_bind_uses_field_name_when_no_key(make_env):
    cfg = ServerConfig()

    Binder(make_env({"SRV_NAME": "edge"})).bind("srv", cfg)

    assert cfg.name == "edge"


def test_bind_leaves_absent_optional_fields_untouched(make_env):
    cfg = ServerConfig()

    Binder(make_env()).bind("", cfg)

    assert cfg.name == "unnamed"
    assert cfg.hosts == []


def test_bind_raises_parse_error(make_env):
    with pytest.raises(ParseError) as exc_info:
        Binder(make_env({"PORT": "eighty"})).bind("", ServerConfig())

    err = exc_info.value
    assert (err.key, err.field, err.type_name, err.value) == ("PORT", "port", "int", "eighty")
    assert str(err).startswith("assigning PORT to port: converting 'eighty' to type int.")


def test_bind_stops_at_first_missing_required_key(make_env, sample_config):
    with pytest.raises(RequiredKeyAbsentError) as exc_info:
        Binder(make_env()).bind("", sample_config)

    assert exc_info.value.key == "SIMPLE"
    assert exc_info.value.field == "simple"
    assert str(exc_info.value) == "required key SIMPLE missing value"


def test_bind_accepts_empty_required_value(make_env, sample_config):
    env = make_env({"SIMPLE": "", "NESTED_REQUIRED": "n", "PTR_REQUIRED": "p"})

    Binder(env).bind("", sample_config)

    assert sample_config.simple == ""


def test_bind_allocates_optional_container(make_env):
    cfg = WithExtras()

    Binder(make_env()).bind("", cfg)

    assert cfg.extras is not None
    assert cfg.extras.colour == ""


def test_bind_fills_existing_optional_container(make_env):
    cfg = WithExtras(extras=Extras(colour="red"))
    original = cfg.extras

    Binder(make_env({"EXTRAS_COLOUR": "blue"})).bind("", cfg)

    assert cfg.extras is original
    assert cfg.extras.colour == "blue"


def test_bind_rejects_unregistered_model(make_env):
    class Unregistered(BaseModel):
        value: str = ""

    with pytest.raises(InvalidSpecificationError, match="no schema registered"):
        Binder(make_env()).bind("", Unregistered())


def test_bind_rejects_mismatched_schema(make_env, sample_config):
    with pytest.raises(InvalidSpecificationError):
        Binder(make_env()).bind("", sample_config, SERVER_SCHEMA)


def test_convert_empty_list():
    assert convert("", List[str]) == []


class Batch(BaseModel):
    ids: Optional[List[int]] = None
    size: Optional[int] = None


define_schema(Batch, scalar("ids", "IDS"), scalar("size", "SIZE"))


def test_bind_splits_optional_sequences(make_env):
    cfg = Batch()

    Binder(make_env({"IDS": "1,2"})).bind("", cfg)

    assert cfg.ids == [1, 2]


def test_parse_error_names_inner_type_of_optional(make_env):
    with pytest.raises(ParseError) as exc_info:
        Binder(make_env({"SIZE": "big"})).bind("", Batch())

    assert exc_info.value.type_name == "int"
    assert "to type int." in str(exc_info.value)


def test_type_name_of_optional_generic():
    assert type_name(Optional[List[int]]) == "List[int]"
    assert type_name(Optional[str]) == "str"


class FrozenSettings(BaseModel):
    name: str = ""

    model_config = {"frozen": True}


class HoldsFrozen(BaseModel):
    inner: FrozenSettings = Field(default_factory=FrozenSettings)


define_schema(
    HoldsFrozen,
    nested("inner", "INNER", define_schema(FrozenSettings, scalar("name", "NAME"))),
)


def test_bind_rejects_frozen_target(make_env):
    with pytest.raises(InvalidSpecificationError, match="frozen"):
        Binder(make_env({"NAME": "x"})).bind("", FrozenSettings())


def test_bind_reports_frozen_nested_model_as_bind_error(make_env):
    with pytest.raises(InvalidSpecificationError, match="cannot assign name"):
        Binder(make_env({"INNER_NAME": "x"})).bind("", HoldsFrozen())


def test_bind_uses_schema_of_registered_base_class(make_env):
    class LocalServer(ServerConfig):
        pass

    cfg = LocalServer()

    Binder(make_env({"NAME": "local"})).bind("", cfg)

    assert cfg.name == "local"
    assert cfg.port == 8080
