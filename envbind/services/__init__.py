from .binder import Binder, bind
from .converter import DEFAULT_PARSERS, Converter
from .custom_parsers import CustomParsers
from .resolver import Resolver, split_env_tag

__all__ = [
    "Binder",
    "bind",
    "Converter",
    "DEFAULT_PARSERS",
    "CustomParsers",
    "Resolver",
    "split_env_tag",
]
