from ..domain import Environment
from ..models import FieldDescriptor
from ..utils import BindingError, MissingRequiredError, OsEnvironment, UnrecognizedOptionError

REQUIRED = "required"


def split_env_tag(tag: str) -> tuple[str, list[str]]:
    """Splits "NAME,opt1,opt2" into ("NAME", ["opt1", "opt2"])."""
    parts = tag.split(",")
    return parts[0], parts[1:]


class Resolver:
    """Turns a field descriptor into its source string."""

    def __init__(self, environment: Environment | None = None) -> None:
        self.env = environment if environment is not None else OsEnvironment()

    def resolve(self, field: FieldDescriptor) -> str:
        """Returns the source value of `field` or raises its resolution error."""
        val, err = self.evaluate(field)
        if err is not None:
            raise err
        return val

    def evaluate(self, field: FieldDescriptor) -> tuple[str, BindingError | None]:
        """
        Returns (value, error). Value is the environment value, else the
        declared default (possibly "").

        Options are applied in order and each one overwrites the running
        value and error, so with several options only the last one counts.
        """
        key, opts = split_env_tag(field.env)
        val = self._get_or(key, field.default_value)
        err: BindingError | None = None

        for opt in opts:
            if opt == "":
                continue
            if opt == REQUIRED:
                val, err = self._get_required(key, field.name)
            else:
                err = UnrecognizedOptionError(opt, field=field.name)

        return val, err

    def _get_or(self, key: str, default: str) -> str:
        if not key:
            return default
        val = self.env.lookup(key)
        return val if val is not None else default

    def _get_required(self, key: str, field_name: str) -> tuple[str, BindingError | None]:
        val = self.env.lookup(key) if key else None
        if val is not None:
            return val, None
        return "", MissingRequiredError(key, field=field_name)
