"""
pycodcache - a reader for the Call of Duty 4 server cache

Usage:
    from pycodcache import ServerCache

    cache = ServerCache("C:/Games/Call of Duty 4/servercache.dat")
    for server in cache.servers:
        print(f"{server.name}: {server.address}")

    for server in cache.favorite_servers:
        print(server)

Or let it find the installed game:
    from pycodcache import detect_cache

    cache = detect_cache()
    if cache:
        print(f"{len(cache.servers)} cached servers")
"""

__version__ = "1.0.0"

from .cache import ServerCache, ServerRecord, CachedServerSlot
from .config import CacheConfig
from .detect import detect_cache, find_cache_path, find_install_path
from .errors import CacheError, ConfigValidationError, InvalidSizeError, PathNotFoundError

__all__ = [
    "ServerCache",
    "ServerRecord",
    "CachedServerSlot",
    "CacheConfig",
    "detect_cache",
    "find_cache_path",
    "find_install_path",
    "CacheError",
    "ConfigValidationError",
    "InvalidSizeError",
    "PathNotFoundError",
]
