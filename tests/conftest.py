"""Pytest configuration and shared fixtures for rustlike tests."""

import logging

import pytest
from rustlike._config import reset_config


@pytest.fixture
def fresh_config():
    """Start the test from the default configuration and a quiet logger."""
    package_logger = logging.getLogger('rustlike')
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    reset_config()
    yield
    reset_config()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from rustlike import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from rustlike import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from rustlike import Some

    return Some('hello')


@pytest.fixture
def sample_empty():
    """Sample Empty value for testing."""
    from rustlike import Empty

    return Empty
