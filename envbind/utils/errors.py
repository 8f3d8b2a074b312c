from enum import Enum


class ErrorCode(str, Enum):
    """Binding error codes."""
    NOT_A_RECORD = "not_a_record"
    UNSUPPORTED_TYPE = "unsupported_type"
    TYPE_MISMATCH = "type_mismatch"
    UNSUPPORTED_SEQUENCE_TYPE = "unsupported_sequence_type"

    UNRECOGNIZED_OPTION = "unrecognized_option"
    MISSING_REQUIRED = "missing_required"

    CONVERSION_FAILURE = "conversion_failure"
    BINDING_FAILED = "binding_failed"


class BindingError(RuntimeError):
    """Base error for environment binding."""
    code: ErrorCode = ErrorCode.BINDING_FAILED
    default_message = "Binding failed"

    def __init__(self, message: str | None = None, *, field: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.field = field

    @property
    def message(self) -> str:
        return str(self)


class NotARecordError(BindingError):
    """Argument is not a mutable record instance."""
    code = ErrorCode.NOT_A_RECORD
    default_message = "Expected a mutable record instance"


class UnsupportedTypeError(BindingError):
    """Field type has no conversion rule."""
    code = ErrorCode.UNSUPPORTED_TYPE
    default_message = "Type is not supported"


class TypeMismatchError(BindingError):
    """A scalar value was supplied directly to a record field."""
    code = ErrorCode.TYPE_MISMATCH
    default_message = "Data type mismatch. Mismatching left and right hand types"


class UnsupportedSequenceTypeError(BindingError):
    """Sequence element type has no conversion rule."""
    code = ErrorCode.UNSUPPORTED_SEQUENCE_TYPE
    default_message = "Unsupported sequence type"


class UnrecognizedOptionError(BindingError):
    """Unknown option in an env annotation."""
    code = ErrorCode.UNRECOGNIZED_OPTION

    def __init__(self, option: str, *, field: str | None = None) -> None:
        super().__init__(f"Env tag option {option} not supported", field=field)
        self.option = option


class MissingRequiredError(BindingError):
    """Required variable is absent from the environment."""
    code = ErrorCode.MISSING_REQUIRED

    def __init__(self, key: str, *, field: str | None = None) -> None:
        super().__init__(f"Required environment variable {key} is not set", field=field)
        self.key = key


class ConversionError(BindingError):
    """Source string could not be parsed into the target type."""
    code = ErrorCode.CONVERSION_FAILURE


class BindingErrors(BindingError):
    """
    Every field error of one binding pass, in declaration order.
    Renders as the individual messages joined with ". ".
    """
    code = ErrorCode.BINDING_FAILED

    def __init__(self, errors: list[BindingError]) -> None:
        super().__init__(". ".join(str(e) for e in errors))
        self.errors = list(errors)

    def codes(self) -> list[ErrorCode]:
        return [e.code for e in self.errors]

    def fields(self) -> list[str | None]:
        return [e.field for e in self.errors]
