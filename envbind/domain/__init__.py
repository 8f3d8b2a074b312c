from .ports import Environment, ParserFunc

__all__ = [
    "Environment",
    "ParserFunc",
]
