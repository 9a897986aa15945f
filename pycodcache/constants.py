"""
servercache.dat layout constants

All offsets are absolute file offsets unless noted as slot-relative.
"""

# Whole-file layout
FILE_SIZE = 0x2FE990  # 3,139,984 bytes
HEADER_SIZE = 0x10
FAVORITE_COUNT_OFFSET = 0x08
PUBLIC_SERVER_OFFSET = 0x10
FAVORITE_SERVER_OFFSET = 0x2F9B90

# Slot layout
SLOT_SIZE = 0x9C  # 156 bytes

PUBLIC_SERVER_COUNT = (FAVORITE_SERVER_OFFSET - PUBLIC_SERVER_OFFSET) // SLOT_SIZE
FAVORITE_SERVER_COUNT = (FILE_SIZE - FAVORITE_SERVER_OFFSET) // SLOT_SIZE


class SlotField:
    """Slot-relative (offset, length) pairs"""
    IP = (0x04, 4)
    PORT = (0x08, 2)
    PLAYERS_ONLINE = (0x19, 1)
    MAX_PLAYERS = (0x1A, 1)
    PING = (0x2A, 2)
    NAME = (0x31, 0x20)
    MAP = (0x51, 0x20)
    MOD = (0x71, 0x18)
    GAME_MODE = (0x89, 0x13)


NEVER_PINGED = 0xFFFF

# Bytes that differ from zero in an allocated-but-never-pinged slot
SENTINEL_BYTES = {
    0x1B: 0x01,
    0x2A: 0xFF,
    0x2B: 0xFF,
}


def build_sentinel(slot_size: int = SLOT_SIZE) -> bytes:
    """Build the byte pattern the game writes into an unpinged slot"""
    pattern = bytearray(slot_size)
    for offset, value in SENTINEL_BYTES.items():
        pattern[offset] = value
    return bytes(pattern)


SENTINEL_SLOT = build_sentinel()
BLANK_SLOT = bytes(SLOT_SIZE)
