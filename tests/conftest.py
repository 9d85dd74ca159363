"""Shared fixtures for all tests."""

import pytest
from loguru import logger


@pytest.fixture
def log_records():
    """Collect loguru records emitted at WARNING and above during a test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="WARNING")
    yield records
    logger.remove(handler_id)
