"""
Shared fixtures for pycodcache tests
"""

import pytest

from pycodcache.config import CacheConfig
from pycodcache.constants import HEADER_SIZE, SLOT_SIZE
from pycodcache.testing import build_cache_bytes


@pytest.fixture
def small_config():
    """Layout with two public slots and two favorite slots"""
    return CacheConfig(
        file_size=HEADER_SIZE + 4 * SLOT_SIZE,
        favorite_server_offset=HEADER_SIZE + 2 * SLOT_SIZE,
    )


@pytest.fixture
def write_cache(tmp_path):
    """Write a synthetic cache file and return its path"""
    def _write(data=None, name="servercache.dat", **kwargs):
        if data is None:
            data = build_cache_bytes(**kwargs)
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write


@pytest.fixture(autouse=True)
def isolate_module_loggers():
    """Save and restore pycodcache logger state so handlers don't leak between tests"""
    import logging
    from pycodcache.utils import MODULE_PREFIXES

    saved = {}
    for name in MODULE_PREFIXES:
        logger = logging.getLogger(name)
        saved[name] = (logger.handlers[:], logger.level, logger.propagate)
        logger.handlers = []
    yield
    for name, (handlers, level, propagate) in saved.items():
        logger = logging.getLogger(name)
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate
