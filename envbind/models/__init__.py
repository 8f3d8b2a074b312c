from .field import (
    DEFAULT_SEPARATOR,
    SEQUENCE_ELEMENT_KINDS,
    FieldDescriptor,
    FieldKind,
    Float32,
    Int64,
    RecordSchema,
    UInt,
    classify,
    env,
    is_record_instance,
    is_record_type,
    schema_of,
)

__all__ = [
    "FieldDescriptor",
    "FieldKind",
    "RecordSchema",
    "DEFAULT_SEPARATOR",
    "SEQUENCE_ELEMENT_KINDS",
    "UInt",
    "Int64",
    "Float32",
    "classify",
    "env",
    "is_record_instance",
    "is_record_type",
    "schema_of",
]
