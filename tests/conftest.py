"""Shared fixtures for the matrixadapter test suite."""
from datetime import datetime
import logging

import numpy as np
import pytest

from matrixadapter.io.inputs import ScriptedInput
from matrixadapter.logging_config import LOGGER_NAME

SEED = 42


@pytest.fixture
def rng():
    """Generator seeded with the reference seed."""
    return np.random.default_rng(SEED)


@pytest.fixture
def make_rng():
    """Factory for independent generators with the same seed."""
    def _make(seed: int = SEED) -> np.random.Generator:
        return np.random.default_rng(seed)
    return _make


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 5, 17, 12, 34, 56)


@pytest.fixture
def scripted():
    """Factory for ScriptedInput sources."""
    def _make(*lines: str) -> ScriptedInput:
        return ScriptedInput(lines)
    return _make


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging() so they never outlive a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
