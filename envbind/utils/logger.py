import json
import logging
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from ..domain import Environment
from .config import OsEnvironment

NAMESPACE = "envbind"

BIND_ID: ContextVar[str] = ContextVar("bind_id", default="-")

# Keys the binder passes through `extra=`; surfaced as top-level JSON keys.
BINDING_CONTEXT = ("record", "field", "env", "errors", "codes")

PLAIN_FORMAT = "%(levelname)s %(name)s [%(bind_id)s] %(message)s"


class BindIdFilter(logging.Filter):
    """Stamps the current bind id on records that lack one."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "bind_id"):
            record.bind_id = BIND_ID.get()
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line, carrying the binding context of the record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "bind_id": getattr(record, "bind_id", BIND_ID.get()),
        }
        for key in BINDING_CONTEXT:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


@contextmanager
def bind_scope(value: str | None = None) -> Iterator[str]:
    """Sets the bind id for the block, restoring the enclosing one afterwards."""
    token = BIND_ID.set(value or uuid.uuid4().hex[:12])
    try:
        yield BIND_ID.get()
    finally:
        BIND_ID.reset(token)


def get_logger(name: str | None = None) -> logging.Logger:
    """Returns a logger under the envbind namespace."""
    if not name or name == NAMESPACE:
        return logging.getLogger(NAMESPACE)
    if name.startswith(NAMESPACE + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{NAMESPACE}.{name}")


def configure_logging(
    *,
    level: str | None = None,
    fmt: str | None = None,
    environment: Environment | None = None,
) -> logging.Logger:
    """
    Sends the envbind namespace to stdout. Meant for programs; the library
    itself never calls it. LOG_LEVEL and LOG_FORMAT (plain|json) are read
    from `environment` when not passed.
    """
    env = environment if environment is not None else OsEnvironment()
    level_str = (level or env.lookup("LOG_LEVEL") or "INFO").upper()
    fmt_str = (fmt or env.lookup("LOG_FORMAT") or "plain").lower()

    log = logging.getLogger(NAMESPACE)
    for h in list(log.handlers):
        log.removeHandler(h)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.addFilter(BindIdFilter())
    handler.setFormatter(JsonFormatter() if fmt_str == "json" else logging.Formatter(PLAIN_FORMAT))

    log.addHandler(handler)
    log.setLevel(getattr(logging, level_str, logging.INFO))
    log.propagate = False
    return log
