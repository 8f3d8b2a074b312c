"""
Binds a config whose private nested record still gets its public fields set.

    EXAMPLE_FOO1=a EXAMPLE_FOO2=b HOSTS=h1:h2 DURATION=1h30m python -m examples.embedded_private_record
"""

import sys
from dataclasses import dataclass, field
from datetime import timedelta

from envbind import BindingError, bind, env
from envbind.utils import configure_logging, get_logger


@dataclass
class Foo:
    name1: str = env("EXAMPLE_FOO1", value="")
    name2: str = env("EXAMPLE_FOO2", value="")


@dataclass
class Config:
    home: str = env("HOME", value="")
    port: int = env("PORT", default="3000", value=0)
    is_production: bool = env("PRODUCTION", value=False)
    hosts: list[str] = env("HOSTS", separator=":", factory=list)
    duration: timedelta = env("DURATION", value=timedelta(0))
    _foo: Foo = field(default_factory=Foo)


def main() -> Config:
    cfg = Config()
    bind(cfg)
    return cfg


if __name__ == "__main__":
    configure_logging()
    log = get_logger("examples.embedded_private_record")
    try:
        print(main())
    except BindingError as e:
        log.error("unable to parse envs: %s", e)
        sys.exit(1)
