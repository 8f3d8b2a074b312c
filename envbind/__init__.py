"""
Populate dataclass and pydantic records from environment variables.

    @dataclass
    class Config:
        home: str = env("HOME", value="")
        port: int = env("PORT", default="3000", value=0)
        hosts: list[str] = env("HOSTS", separator=":", factory=list)

    cfg = bind(Config())
"""

from .domain import Environment, ParserFunc
from .models import FieldDescriptor, FieldKind, Float32, Int64, RecordSchema, UInt, env, schema_of
from .services import Binder, Converter, CustomParsers, Resolver, bind
from .utils import (
    BindingError,
    BindingErrors,
    ConversionError,
    ErrorCode,
    MappingEnvironment,
    MissingRequiredError,
    NotARecordError,
    OsEnvironment,
    TypeMismatchError,
    UnrecognizedOptionError,
    UnsupportedSequenceTypeError,
    UnsupportedTypeError,
)

__all__ = [
    "bind",
    "Binder",
    "Resolver",
    "Converter",
    "CustomParsers",
    "env",
    "schema_of",
    "FieldDescriptor",
    "FieldKind",
    "RecordSchema",
    "UInt",
    "Int64",
    "Float32",
    "Environment",
    "ParserFunc",
    "OsEnvironment",
    "MappingEnvironment",
    "ErrorCode",
    "BindingError",
    "BindingErrors",
    "NotARecordError",
    "UnsupportedTypeError",
    "TypeMismatchError",
    "UnsupportedSequenceTypeError",
    "UnrecognizedOptionError",
    "MissingRequiredError",
    "ConversionError",
]
