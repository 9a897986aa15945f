"""
Logging configuration for pycodcache with clear module prefixes
"""

import logging

# Module prefix mapping
MODULE_PREFIXES = {
    'pycodcache.cache.server_cache': '[CACHE]',
    'pycodcache.cache.record': '[SLOT]',
    'pycodcache.detect': '[DETECT]',
    'pycodcache.dump': '[DUMP]',
}


class ModulePrefixFormatter(logging.Formatter):
    """Custom formatter that adds module prefix to log messages"""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(
            fmt='%(asctime)s - %(prefix)s %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

    def format(self, record):
        record.prefix = self.prefix
        return super().format(record)


def configure_logging(level: int = logging.INFO):
    """Give every pycodcache module a prefixed stderr handler"""
    for module_name, prefix in MODULE_PREFIXES.items():
        logger = logging.getLogger(module_name)
        logger.setLevel(level)

        # Don't add handler if already configured
        if logger.handlers:
            continue

        handler = logging.StreamHandler()
        handler.setFormatter(ModulePrefixFormatter(prefix))
        logger.addHandler(handler)
        logger.propagate = False  # Don't propagate to root logger
