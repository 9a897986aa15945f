"""
pycodcache Testing - builders for synthetic cache files
"""

from .fixtures import build_cache_bytes, build_slot, sentinel_slot

__all__ = [
    'build_cache_bytes',
    'build_slot',
    'sentinel_slot',
]
