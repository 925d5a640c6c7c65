"""
Shared fixtures for protoclass tests
"""

import pytest

from protoclass import Factory, Log


@pytest.fixture
def factory():
    """Factory using the default source scan"""
    return Factory(detect="scan")


@pytest.fixture
def marker_factory():
    """Factory honouring only the explicit @uses_super marker"""
    return Factory(detect="marker")


@pytest.fixture
def log_records():
    """Capture protoclass log records at debug level"""
    log = Log.get("protoclass")
    old_level = log.level()
    records = []
    handler = records.append
    Log.add_handler(handler)
    log.level("debug")
    yield records
    Log.remove_handler(handler)
    log.level(old_level)
