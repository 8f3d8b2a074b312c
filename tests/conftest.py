import logging

import pytest

from envbind import MappingEnvironment


@pytest.fixture(autouse=True)
def envbind_logger():
    """Quiets the envbind namespace and undoes any configure_logging() a test makes."""
    log = logging.getLogger("envbind")
    handlers, level, propagate = list(log.handlers), log.level, log.propagate
    log.setLevel(logging.WARNING)
    yield log
    for h in list(log.handlers):
        log.removeHandler(h)
    for h in handlers:
        log.addHandler(h)
    log.setLevel(level)
    log.propagate = propagate


@pytest.fixture
def make_env():
    def _make(**values):
        return MappingEnvironment(values)
    return _make
