from typing import Any, TypeVar

from ..domain import Environment
from ..models import FieldDescriptor, FieldKind, is_record_instance, schema_of
from ..utils import BindingError, BindingErrors, NotARecordError, bind_scope, get_logger
from .converter import Converter
from .resolver import Resolver, split_env_tag

R = TypeVar("R")


class Binder:
    """
    Populates a record's annotated fields from the environment.

    Field errors are collected and raised together as BindingErrors once every
    field has been visited. Two cases abort the pass instead: the argument is
    not a mutable record, and a failure while binding a record held through an
    Optional[Record] reference.

    Errors inside a nested record held by value are discarded unless `strict`
    is set, in which case they join the outer error list.
    """

    def __init__(
        self,
        environment: Environment | None = None,
        converter: Converter | None = None,
        *,
        strict: bool = False,
    ) -> None:
        self.resolver = Resolver(environment)
        self.converter = converter or Converter()
        self.strict = strict
        self.log = get_logger("envbind.binder")

    def bind(self, record: R) -> R:
        """Binds `record` in place and returns it."""
        name = type(record).__name__
        with bind_scope():
            self.log.debug("binding record", extra={"record": name})
            try:
                self._bind(record)
            except BindingErrors as e:
                self.log.info(
                    "binding failed",
                    extra={"record": name, "errors": len(e.errors), "codes": [c.value for c in e.codes()]},
                )
                raise
            self.log.debug("record bound", extra={"record": name})
        return record

    def _bind(self, record: Any) -> None:
        if not is_record_instance(record) or schema_of(type(record)).frozen:
            raise NotARecordError()
        errors = self._bind_fields(record)
        if errors:
            raise BindingErrors(errors)

    def _bind_fields(self, record: Any) -> list[BindingError]:
        errors: list[BindingError] = []

        for field in schema_of(type(record)):
            current = getattr(record, field.name, None)

            if field.kind is FieldKind.RECORD_REF and current is not None and field.writable:
                self._bind(current)
                continue

            if not field.writable and field.kind is not FieldKind.RECORD:
                continue

            value, err = self.resolver.evaluate(field)

            if field.is_record and value == "" and is_record_instance(current):
                self._bind_nested(field, current, errors)
                continue

            if err is not None:
                errors.append(err)
                continue
            if value == "":
                continue

            try:
                self.converter.assign(record, field, value)
            except BindingError as e:
                errors.append(e)
                continue
            self.log.debug("field bound", extra={"field": field.name, "env": split_env_tag(field.env)[0]})

        return errors

    def _bind_nested(self, field: FieldDescriptor, nested: Any, errors: list[BindingError]) -> None:
        nested_errors = self._bind_fields(nested)
        if not nested_errors:
            return
        if self.strict:
            errors.extend(nested_errors)
            return
        self.log.debug("nested record errors discarded", extra={"field": field.name, "errors": len(nested_errors)})


def bind(record: R, *, environment: Environment | None = None, strict: bool = False) -> R:
    """Binds `record` from `environment` (os.environ by default) and returns it."""
    return Binder(environment, strict=strict).bind(record)
