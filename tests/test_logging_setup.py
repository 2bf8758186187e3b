import logging

import pytest

from astar_engine.config import LoggingConfig
from astar_engine.logging_setup import configure_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    engine = logging.getLogger("astar_engine.search.engine")
    engine_level = engine.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    engine.setLevel(engine_level)


def test_global_and_module_levels(restore_logging):
    configure_logging(
        LoggingConfig(
            global_level="INFO",
            module_levels={"astar_engine.search.engine": "debug"},
        )
    )
    assert logging.getLogger().getEffectiveLevel() == logging.INFO
    assert logging.getLogger("astar_engine.search.engine").level == logging.DEBUG


def test_invalid_levels_fall_back(restore_logging):
    configure_logging(
        LoggingConfig(
            global_level="LOUD",
            module_levels={"astar_engine.search.engine": "nope"},
        )
    )
    assert logging.getLogger().getEffectiveLevel() == logging.WARNING
    assert logging.getLogger("astar_engine.search.engine").level == logging.NOTSET
