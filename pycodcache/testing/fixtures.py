"""
Slot and file builders for pycodcache testing
"""

from typing import Dict, Optional

from .. import constants
from ..config import CacheConfig
from ..constants import SlotField


def _put_string(slot: bytearray, field, value: str):
    offset, length = field
    raw = value.encode('latin-1')
    if len(raw) > length:
        raise ValueError(f"{value!r} does not fit in {length} bytes")
    slot[offset:offset + len(raw)] = raw


def build_slot(name: str = "", ip: str = "0.0.0.0", port: int = 0, map: str = "",
               mod: str = "", game_mode: str = "", players_online: int = 0,
               max_players: int = 0, ping: int = 0) -> bytes:
    """Build one 156-byte slot with fields at their documented offsets"""
    slot = bytearray(constants.SLOT_SIZE)

    offset, length = SlotField.IP
    slot[offset:offset + length] = bytes(int(part) for part in ip.split('.'))

    offset, length = SlotField.PORT
    slot[offset:offset + length] = port.to_bytes(length, 'little')

    offset, length = SlotField.PING
    slot[offset:offset + length] = ping.to_bytes(length, 'little')

    slot[SlotField.PLAYERS_ONLINE[0]] = players_online
    slot[SlotField.MAX_PLAYERS[0]] = max_players

    _put_string(slot, SlotField.NAME, name)
    _put_string(slot, SlotField.MAP, map)
    _put_string(slot, SlotField.MOD, mod)
    _put_string(slot, SlotField.GAME_MODE, game_mode)
    return bytes(slot)


def sentinel_slot() -> bytes:
    """The never-pinged slot pattern"""
    return constants.SENTINEL_SLOT


def build_cache_bytes(public: Optional[Dict[int, bytes]] = None,
                      favorites: Optional[Dict[int, bytes]] = None,
                      favorite_count: int = 0,
                      config: Optional[CacheConfig] = None) -> bytes:
    """Build a zero-filled cache file with the given slots filled in.

    Args:
        public: Slot index -> slot bytes for the public region
        favorites: Slot index -> slot bytes for the favorites region
        favorite_count: Value stored in the header favorite count byte
        config: Layout to build for (default: CacheConfig())
    """
    config = config or CacheConfig()
    data = bytearray(config.file_size)
    data[config.favorite_count_offset] = favorite_count

    regions = [
        (config.public_server_offset, public or {}),
        (config.favorite_server_offset, favorites or {}),
    ]
    for start, slots in regions:
        for index, slot in slots.items():
            offset = start + index * constants.SLOT_SIZE
            data[offset:offset + len(slot)] = slot

    return bytes(data)
