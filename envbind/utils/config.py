import os
from collections.abc import Mapping


class OsEnvironment:
    """os.environ-backed environment, read at call time."""
    def lookup(self, name: str) -> str | None:
        return os.environ.get(name)


class MappingEnvironment:
    """Environment backed by a plain mapping (tests, embedding)."""
    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def lookup(self, name: str) -> str | None:
        return self._values.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __repr__(self) -> str:
        return f"MappingEnvironment(keys={sorted(self._values)!r})"
