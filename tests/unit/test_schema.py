from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

import pytest
from pydantic import BaseModel, ConfigDict, Field

from envbind import FieldKind, Float32, Int64, UInt, env, schema_of


@dataclass
class Inner:
    name: str = env("INNER_NAME", value="")


@dataclass
class Everything:
    text: str = env("TEXT", value="")
    flag: bool = env("FLAG", value=False)
    count: int = env("COUNT", default="3", value=0)
    size: UInt = env("SIZE", value=0)
    big: Int64 = env("BIG", value=0)
    ratio: Float32 = env("RATIO", value=0.0)
    precise: float = env("PRECISE", value=0.0)
    timeout: timedelta = env("TIMEOUT", value=timedelta(0))
    maybe: Optional[int] = env("MAYBE", value=None)
    hosts: list[str] = env("HOSTS", separator=":", factory=list)
    weights: tuple[float, ...] = env("WEIGHTS", value=())
    ids: list[Int64] = env("IDS", factory=list)
    sizes: list[UInt] = env("SIZES", factory=list)
    inner: Inner = field(default_factory=Inner)
    ref: Optional[Inner] = None
    mapping: dict = field(default_factory=dict)
    _hidden: str = env("HIDDEN", value="")


@dataclass(frozen=True)
class Frozen:
    name: str = env("NAME", value="")


class Model(BaseModel):
    host: str = Field("localhost", json_schema_extra={"env": "HOST", "envDefault": "0.0.0.0"})
    port: int = Field(0, json_schema_extra={"env": "PORT,required"})
    plain: str = "x"


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = Field("", json_schema_extra={"env": "HOST"})


def test_dataclass_schema_kinds_in_declaration_order():
    schema = schema_of(Everything)
    kinds = {f.name: f.kind for f in schema}

    assert [f.name for f in schema][:3] == ["text", "flag", "count"]
    assert kinds["text"] is FieldKind.STRING
    assert kinds["flag"] is FieldKind.BOOL
    assert kinds["count"] is FieldKind.INT
    assert kinds["size"] is FieldKind.UINT
    assert kinds["big"] is FieldKind.INT64
    assert kinds["ratio"] is FieldKind.FLOAT32
    assert kinds["precise"] is FieldKind.FLOAT64
    assert kinds["timeout"] is FieldKind.DURATION
    assert kinds["maybe"] is FieldKind.INT
    assert kinds["inner"] is FieldKind.RECORD
    assert kinds["ref"] is FieldKind.RECORD_REF
    assert kinds["mapping"] is FieldKind.UNSUPPORTED


def test_sequence_descriptors():
    schema = schema_of(Everything)

    hosts = schema.field("hosts")
    assert hosts.kind is FieldKind.SEQUENCE
    assert hosts.element_kind is FieldKind.STRING
    assert hosts.container is list
    assert hosts.separator == ":"

    weights = schema.field("weights")
    assert weights.container is tuple and weights.element_kind is FieldKind.FLOAT64
    assert weights.separator == ","

    assert schema.field("ids").element_kind is FieldKind.INT64
    assert schema.field("sizes").element_kind is FieldKind.UNSUPPORTED


def test_annotations_and_writability():
    schema = schema_of(Everything)

    count = schema.field("count")
    assert count.env == "COUNT" and count.default_value == "3"

    assert schema.field("text").default_value == ""
    assert schema.field("_hidden").writable is False
    assert schema.field("text").writable is True
    assert schema.field("inner").record_type is Inner
    assert schema.field("ref").record_type is Inner


def test_env_helper_builds_required_tag():
    @dataclass
    class Cfg:
        key: str = env("API_KEY", required=True, value="")

    assert schema_of(Cfg).field("key").env == "API_KEY,required"


def test_frozen_dataclass_schema():
    schema = schema_of(Frozen)
    assert schema.frozen is True
    assert all(not f.writable for f in schema)


def test_pydantic_schema():
    schema = schema_of(Model)
    assert [f.name for f in schema] == ["host", "port", "plain"]
    assert schema.field("host").env == "HOST"
    assert schema.field("host").default_value == "0.0.0.0"
    assert schema.field("port").env == "PORT,required"
    assert schema.field("port").kind is FieldKind.INT
    assert schema.field("plain").env == ""
    assert schema.frozen is False

    assert schema_of(FrozenModel).frozen is True


def test_schema_is_cached_per_type():
    assert schema_of(Everything) is schema_of(Everything)


def test_schema_of_rejects_non_records():
    with pytest.raises(TypeError):
        schema_of(dict)
    with pytest.raises(KeyError):
        schema_of(Inner).field("missing")
