from typing import Any

from ..domain import ParserFunc
from ..utils import ConversionError, UnsupportedTypeError


class CustomParsers:
    """
    Registry of target type -> parser function.
    Not consulted by Binder; kept as the extension point for type-specific decoding.
    """

    def __init__(self, parsers: dict[type, ParserFunc] | None = None) -> None:
        self._parsers: dict[type, ParserFunc] = dict(parsers or {})

    def register(self, target: type, func: ParserFunc) -> None:
        self._parsers[target] = func

    def get(self, target: type) -> ParserFunc | None:
        return self._parsers.get(target)

    def __contains__(self, target: object) -> bool:
        return target in self._parsers

    def __len__(self) -> int:
        return len(self._parsers)

    def parse(self, target: type, value: str) -> Any:
        func = self._parsers.get(target)
        if func is None:
            raise UnsupportedTypeError()
        try:
            return func(value)
        except Exception as e:
            raise ConversionError(f"Custom parser error: {e}") from e
