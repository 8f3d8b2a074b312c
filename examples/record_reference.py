"""
Binds a config that holds a nested record through an Optional reference.

    EXAMPLE_FOO=x PORT=8080 python -m examples.record_reference
"""

import sys
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from envbind import BindingError, bind, env
from envbind.utils import configure_logging, get_logger


@dataclass
class Foo:
    name: str = env("EXAMPLE_FOO", value="")


@dataclass
class Config:
    home: str = env("HOME", value="")
    port: int = env("PORT", default="3000", value=0)
    is_production: bool = env("PRODUCTION", value=False)
    hosts: list[str] = env("HOSTS", separator=":", factory=list)
    duration: timedelta = env("DURATION", value=timedelta(0))
    example_foo: Optional[Foo] = None


def main() -> Config:
    cfg = Config(example_foo=Foo(name="a"))
    return bind(cfg)


if __name__ == "__main__":
    configure_logging()
    log = get_logger("examples.record_reference")
    try:
        cfg = main()
    except BindingError as e:
        log.error("unable to parse envs: %s", e)
        sys.exit(1)
    print(cfg)
    print(f"example_foo: {cfg.example_foo}")
