from .config import MappingEnvironment, OsEnvironment
from .durations import parse_duration, to_timedelta
from .errors import (
    BindingError,
    BindingErrors,
    ConversionError,
    ErrorCode,
    MissingRequiredError,
    NotARecordError,
    TypeMismatchError,
    UnrecognizedOptionError,
    UnsupportedSequenceTypeError,
    UnsupportedTypeError,
)
from .logger import BIND_ID, BindIdFilter, JsonFormatter, bind_scope, configure_logging, get_logger
from .parsing import parse_bool, parse_float, parse_int, parse_uint

__all__ = [
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
    "parse_bool",
    "parse_int",
    "parse_uint",
    "parse_float",
    "parse_duration",
    "to_timedelta",
    "configure_logging",
    "get_logger",
    "bind_scope",
    "BIND_ID",
    "JsonFormatter",
    "BindIdFilter",
]
