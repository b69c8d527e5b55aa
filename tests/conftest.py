from typing import Dict, Optional

import pytest
from pydantic import BaseModel, Field

from envdiag import (
    MappingEnvironment,
    define_schema,
    nested,
    optional_nested,
    reset_structlog,
    scalar,
)


class NestedConfig(BaseModel):
    required: str = ""
    optional: str = ""


class PointerConfig(BaseModel):
    required: str = ""


class SampleConfig(BaseModel):
    simple: str = ""
    with_default: str = ""
    nested: NestedConfig = Field(default_factory=NestedConfig)
    pointer_nested: Optional[PointerConfig] = None


NESTED_SCHEMA = define_schema(
    NestedConfig,
    scalar("required", "REQUIRED", required=True),
    scalar("optional", "OPTIONAL"),
)

POINTER_SCHEMA = define_schema(
    PointerConfig,
    scalar("required", "REQUIRED", required=True),
)

SAMPLE_SCHEMA = define_schema(
    SampleConfig,
    scalar("simple", "SIMPLE", required=True),
    scalar("with_default", "WITH_DEFAULT", default="default_value"),
    nested("nested", "NESTED", NESTED_SCHEMA),
    optional_nested("pointer_nested", "PTR", POINTER_SCHEMA),
)

COMPLETE_ENV = {
    "SIMPLE": "value",
    "NESTED_REQUIRED": "nested_value",
    "PTR_REQUIRED": "ptr_value",
}


@pytest.fixture(autouse=True)
def _fresh_structlog():
    yield
    reset_structlog()


@pytest.fixture
def sample_schema():
    return SAMPLE_SCHEMA


@pytest.fixture
def sample_config():
    return SampleConfig()


@pytest.fixture
def make_env():
    def _make(values: Optional[Dict[str, str]] = None) -> MappingEnvironment:
        return MappingEnvironment(values or {})

    return _make


@pytest.fixture
def complete_env(make_env):
    return make_env(COMPLETE_ENV)
