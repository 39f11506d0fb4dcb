"""Pytest configuration and fixtures."""

import logging

import pytest

import tinyunit
from tinyunit import Harness, HarnessConfig
from tinyunit.reporting import CollectingReporter


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up tinyunit loggers after each test to prevent handler leaks."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("tinyunit")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture(autouse=True)
def reset_default_harness():
    """Each test starts with no process-wide harness."""
    tinyunit._harness = None
    yield
    tinyunit._harness = None


@pytest.fixture
def collector() -> CollectingReporter:
    return CollectingReporter()


@pytest.fixture
def harness(collector) -> Harness:
    """Immediate-mode harness with no terminal output."""
    return Harness(HarnessConfig(reporters=[]), reporters=[collector])
