"""
Exceptions raised while loading a server cache
"""


class CacheError(Exception):
    """Base class for all pycodcache errors"""
    pass


class PathNotFoundError(CacheError, FileNotFoundError):
    """Raised when the cache file path does not exist"""
    pass


class InvalidSizeError(CacheError, ValueError):
    """Raised when the cache file is not exactly the expected size"""

    def __init__(self, path, expected: int, actual: int):
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(f"invalid file size for {path}: expected {expected} bytes, got {actual}")


class ConfigValidationError(CacheError, ValueError):
    """Raised when configuration validation fails"""
    pass
