"""
Domain ports for the binding engine.
Adapters implement these so the engine never reaches for process state directly.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol


class Environment(Protocol):
    """Read-only key -> string lookup with a presence test."""
    def lookup(self, name: str) -> str | None: ...


ParserFunc = Callable[[str], Any]
