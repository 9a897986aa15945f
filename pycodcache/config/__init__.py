"""
Configuration system for pycodcache
"""

from .cache_config import CacheConfig
from ..errors import ConfigValidationError

__all__ = ['CacheConfig', 'ConfigValidationError']
