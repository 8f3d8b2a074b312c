from functools import partial
from typing import Any, Callable

from ..models import SEQUENCE_ELEMENT_KINDS, FieldDescriptor, FieldKind
from ..utils import (
    ConversionError,
    TypeMismatchError,
    UnsupportedSequenceTypeError,
    UnsupportedTypeError,
    parse_bool,
    parse_duration,
    parse_float,
    parse_int,
    parse_uint,
    to_timedelta,
)

ScalarParser = Callable[[str], Any]


def _verbatim(text: str) -> str:
    return text


def _duration(text: str):
    return to_timedelta(parse_duration(text))


DEFAULT_PARSERS: dict[FieldKind, ScalarParser] = {
    FieldKind.STRING: _verbatim,
    FieldKind.BOOL: parse_bool,
    FieldKind.INT: partial(parse_int, bits=32),
    FieldKind.UINT: partial(parse_uint, bits=32),
    FieldKind.INT64: partial(parse_int, bits=64),
    FieldKind.FLOAT32: partial(parse_float, bits=32),
    FieldKind.FLOAT64: partial(parse_float, bits=64),
    FieldKind.DURATION: _duration,
}


class Converter:
    """Converts source strings into typed field values, dispatching on field kind."""

    def __init__(self, parsers: dict[FieldKind, ScalarParser] | None = None) -> None:
        self._parsers: dict[FieldKind, ScalarParser] = dict(DEFAULT_PARSERS)
        if parsers:
            self._parsers.update(parsers)
        self._handlers: dict[FieldKind, Callable[[FieldDescriptor, str], Any]] = {
            FieldKind.SEQUENCE: self._sequence,
            FieldKind.RECORD: self._mismatch,
            FieldKind.RECORD_REF: self._unsupported,
            FieldKind.UNSUPPORTED: self._unsupported,
        }

    def register(self, kind: FieldKind, parser: ScalarParser) -> None:
        """Replaces (or adds) the scalar parser for `kind`."""
        if kind in self._handlers:
            raise ValueError(f"{kind.value} is not a scalar kind")
        self._parsers[kind] = parser

    def convert(self, field: FieldDescriptor, value: str) -> Any:
        handler = self._handlers.get(field.kind)
        if handler is not None:
            return handler(field, value)
        parser = self._parsers.get(field.kind)
        if parser is None:
            raise UnsupportedTypeError(field=field.name)
        return self._parse(parser, field, value)

    def assign(self, record: Any, field: FieldDescriptor, value: str) -> None:
        """Converts `value` and stores it on `record`."""
        setattr(record, field.name, self.convert(field, value))

    def _parse(self, parser: ScalarParser, field: FieldDescriptor, text: str) -> Any:
        try:
            return parser(text)
        except ValueError as e:
            raise ConversionError(str(e), field=field.name) from e

    def _sequence(self, field: FieldDescriptor, value: str) -> Any:
        kind = field.element_kind
        parser = self._parsers.get(kind) if kind in SEQUENCE_ELEMENT_KINDS else None
        if parser is None:
            raise UnsupportedSequenceTypeError(field=field.name)
        items = [self._parse(parser, field, piece) for piece in value.split(field.separator)]
        return tuple(items) if field.container is tuple else items

    def _mismatch(self, field: FieldDescriptor, value: str) -> Any:
        raise TypeMismatchError(field=field.name)

    def _unsupported(self, field: FieldDescriptor, value: str) -> Any:
        raise UnsupportedTypeError(field=field.name)
