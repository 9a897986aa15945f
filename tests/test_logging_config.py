"""
Tests for prefixed logging setup
"""

import logging

from pycodcache.utils import MODULE_PREFIXES, ModulePrefixFormatter, configure_logging


class TestConfigureLogging:
    """Test module logger configuration"""

    def test_one_prefixed_handler_per_module(self):
        configure_logging(logging.DEBUG)
        configure_logging(logging.WARNING)

        for module_name, prefix in MODULE_PREFIXES.items():
            logger = logging.getLogger(module_name)
            assert len(logger.handlers) == 1
            assert logger.handlers[0].formatter.prefix == prefix
            assert logger.level == logging.WARNING
            assert logger.propagate is False

    def test_formatter_adds_prefix(self):
        formatter = ModulePrefixFormatter('[CACHE]')
        record = logging.LogRecord('pycodcache.cache.server_cache', logging.INFO,
                                   __file__, 1, "loaded", None, None)

        assert formatter.format(record).endswith("[CACHE] INFO - loaded")
