"""
pycodcache Cache - servercache.dat decoding
"""

from .models import ServerRecord
from .record import CachedServerSlot, iter_slots, read_cstring, unique_records
from .server_cache import ServerCache

__all__ = [
    'ServerCache',
    'ServerRecord',
    'CachedServerSlot',
    'iter_slots',
    'read_cstring',
    'unique_records',
]
