"""
Explicit field schema for bindable records.

A record is a dataclass or a pydantic model. Its schema is the ordered list of
FieldDescriptor value objects, built once per record type and cached.
"""

from __future__ import annotations

import dataclasses
import sys
import types
import typing
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from functools import lru_cache
from typing import Any, NewType

from pydantic import BaseModel

from ..utils.logger import get_logger

log = get_logger("envbind.schema")

UInt = NewType("UInt", int)
Int64 = NewType("Int64", int)
Float32 = NewType("Float32", float)

ENV_TAG = "env"
DEFAULT_TAG = "envDefault"
SEPARATOR_TAG = "envSeparator"
DEFAULT_SEPARATOR = ","


class FieldKind(str, Enum):
    STRING = "string"
    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    DURATION = "duration"
    SEQUENCE = "sequence"
    RECORD = "record"
    RECORD_REF = "record_ref"
    UNSUPPORTED = "unsupported"


SEQUENCE_ELEMENT_KINDS = frozenset({
    FieldKind.STRING,
    FieldKind.INT,
    FieldKind.INT64,
    FieldKind.FLOAT32,
    FieldKind.FLOAT64,
    FieldKind.BOOL,
})

_SCALARS: dict[Any, FieldKind] = {
    str: FieldKind.STRING,
    bool: FieldKind.BOOL,
    int: FieldKind.INT,
    UInt: FieldKind.UINT,
    Int64: FieldKind.INT64,
    Float32: FieldKind.FLOAT32,
    float: FieldKind.FLOAT64,
    timedelta: FieldKind.DURATION,
}


@dataclass(frozen=True)
class FieldDescriptor:
    """
    One record field: name, resolved type, kind and env annotations.
    `env` is the raw annotation, "NAME[,option...]".
    """
    name: str
    type: Any
    kind: FieldKind
    writable: bool = True
    env: str = ""
    default_value: str = ""
    separator: str = DEFAULT_SEPARATOR
    element_kind: FieldKind | None = None
    container: type | None = None
    record_type: type | None = None

    @property
    def is_record(self) -> bool:
        return self.kind in (FieldKind.RECORD, FieldKind.RECORD_REF)


@dataclass(frozen=True)
class RecordSchema:
    """Ordered field descriptors of one record type."""
    record_type: type
    fields: tuple[FieldDescriptor, ...]
    frozen: bool = False

    def __iter__(self):
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def field(self, name: str) -> FieldDescriptor:
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(name)


def is_record_type(tp: Any) -> bool:
    """True for dataclass types and pydantic model types."""
    if not isinstance(tp, type) or typing.get_origin(tp) is not None:
        return False
    return dataclasses.is_dataclass(tp) or issubclass(tp, BaseModel)


def is_record_instance(obj: Any) -> bool:
    return not isinstance(obj, type) and is_record_type(type(obj))


def _unwrap_optional(tp: Any) -> tuple[Any, bool]:
    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) == 1 and len(args) < len(typing.get_args(tp)):
            return args[0], True
    return tp, False


def _sequence_parts(tp: Any) -> tuple[type, Any] | None:
    if tp is list or tp is tuple:
        return tp, None
    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin is list:
        return list, args[0] if args else None
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple, args[0]
        return tuple, None
    return None


def classify(tp: Any) -> dict[str, Any]:
    """Maps a type hint to the descriptor attributes the converter needs."""
    inner, optional = _unwrap_optional(tp)
    if is_record_type(inner):
        kind = FieldKind.RECORD_REF if optional else FieldKind.RECORD
        return {"kind": kind, "record_type": inner}

    scalar = _SCALARS.get(inner)
    if scalar is not None:
        return {"kind": scalar}

    seq = _sequence_parts(inner)
    if seq is not None:
        container, element = seq
        element_kind = _SCALARS.get(element, FieldKind.UNSUPPORTED)
        if element_kind not in SEQUENCE_ELEMENT_KINDS:
            element_kind = FieldKind.UNSUPPORTED
        return {"kind": FieldKind.SEQUENCE, "container": container, "element_kind": element_kind}

    return {"kind": FieldKind.UNSUPPORTED}


def _descriptor(name: str, tp: Any, tags: dict[str, Any], writable: bool) -> FieldDescriptor:
    return FieldDescriptor(
        name=name,
        type=tp,
        writable=writable,
        env=str(tags.get(ENV_TAG) or ""),
        default_value=str(tags.get(DEFAULT_TAG) or ""),
        separator=str(tags.get(SEPARATOR_TAG) or DEFAULT_SEPARATOR),
        **classify(tp),
    )


def _resolve_hint(cls: type, name: str, annotation: Any) -> Any:
    """Evaluates one postponed annotation; an out-of-scope name leaves it a string."""
    if not isinstance(annotation, str):
        return annotation
    owner = next((base for base in cls.__mro__ if name in base.__dict__.get("__annotations__", {})), cls)
    module = sys.modules.get(owner.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    try:
        return eval(annotation, globalns, dict(vars(owner)))
    except NameError as e:
        log.warning("unresolved type hint %r: %s", annotation, e, extra={"record": cls.__name__, "field": name})
        return annotation


def _dataclass_schema(cls: type) -> RecordSchema:
    try:
        hints = typing.get_type_hints(cls)
    except NameError:
        # One unresolvable name must not cost the other fields their types.
        hints = {f.name: _resolve_hint(cls, f.name, f.type) for f in dataclasses.fields(cls)}
    frozen = bool(cls.__dataclass_params__.frozen)
    fields = tuple(
        _descriptor(f.name, hints.get(f.name, f.type), dict(f.metadata),
                    writable=not frozen and not f.name.startswith("_"))
        for f in dataclasses.fields(cls)
    )
    return RecordSchema(record_type=cls, fields=fields, frozen=frozen)


def _model_schema(cls: type[BaseModel]) -> RecordSchema:
    frozen = bool(cls.model_config.get("frozen", False))
    fields = []
    for name, info in cls.model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        writable = not frozen and not info.frozen and not name.startswith("_")
        fields.append(_descriptor(name, info.annotation, dict(extra), writable))
    return RecordSchema(record_type=cls, fields=tuple(fields), frozen=frozen)


@lru_cache(maxsize=None)
def schema_of(record_type: type) -> RecordSchema:
    """Builds (once) the schema of a dataclass or pydantic model type."""
    if dataclasses.is_dataclass(record_type):
        return _dataclass_schema(record_type)
    if isinstance(record_type, type) and issubclass(record_type, BaseModel):
        return _model_schema(record_type)
    raise TypeError(f"{record_type!r} is not a record type")


def env(
    name: str = "",
    *,
    default: str | None = None,
    required: bool = False,
    separator: str | None = None,
    value: Any = dataclasses.MISSING,
    factory: Any = dataclasses.MISSING,
) -> Any:
    """
    Dataclass field carrying env annotations.

        port: int = env("PORT", default="3000", value=0)
        hosts: list[str] = env("HOSTS", separator=":", factory=list)
    """
    metadata: dict[str, str] = {ENV_TAG: f"{name},required" if required else name}
    if default is not None:
        metadata[DEFAULT_TAG] = default
    if separator is not None:
        metadata[SEPARATOR_TAG] = separator
    return dataclasses.field(default=value, default_factory=factory, metadata=metadata)
