"""
Cached server slot - fixed-width view over one 156-byte server entry

Slots are read straight out of the loaded cache buffer. Nothing is copied
until decode() builds an owned ServerRecord.
"""

import logging
from typing import Iterable, Iterator, Union

from .. import constants
from ..constants import SlotField
from .models import ServerRecord

logger = logging.getLogger(__name__)

Buffer = Union[bytes, bytearray, memoryview]


def read_cstring(data: Buffer, offset: int, length: int) -> str:
    """Read a NUL-terminated string of at most length bytes.

    Every byte maps to the code point of the same value, so high bytes pass
    through untouched and decoding can never fail.
    """
    raw = bytes(data[offset:offset + length])
    end = raw.find(b'\x00')
    if end != -1:
        raw = raw[:end]
    return raw.decode('latin-1')


class CachedServerSlot:
    """Read-only view of a single server slot"""

    __slots__ = ('_view', 'offset')

    def __init__(self, view: memoryview, offset: int):
        self._view = view
        self.offset = offset

    def __len__(self) -> int:
        return len(self._view)

    def __repr__(self) -> str:
        return f"CachedServerSlot(offset=0x{self.offset:X})"

    @property
    def data(self) -> bytes:
        """Raw slot bytes"""
        return self._view.tobytes()

    def _field(self, field) -> int:
        offset, length = field
        return int.from_bytes(self._view[offset:offset + length], 'little')

    def _string(self, field) -> str:
        offset, length = field
        return read_cstring(self._view, offset, length)

    @property
    def ip(self) -> str:
        offset, length = SlotField.IP
        return '.'.join(str(b) for b in self._view[offset:offset + length])

    @property
    def port(self) -> int:
        # Bytes 0x20 0x71 give 28960 (0x7120)
        return self._field(SlotField.PORT)

    @property
    def ping(self) -> int:
        return self._field(SlotField.PING)

    @property
    def is_pinged(self) -> bool:
        """False when the stored ping is the never-pinged marker"""
        return self.ping != constants.NEVER_PINGED

    def is_sentinel(self) -> bool:
        """Check for the exact allocated-but-never-pinged bit pattern.

        Every byte must match: 0x01 at 27, 0xFF at 42 and 43, zero
        everywhere else. A single stray byte means the slot holds data.
        """
        if len(self._view) != len(constants.SENTINEL_SLOT):
            return False
        return self._view == constants.SENTINEL_SLOT

    def is_blank(self) -> bool:
        """Check whether every byte of the slot is zero"""
        return self._view == constants.BLANK_SLOT

    def decode(self) -> ServerRecord:
        """Decode the slot into an owned ServerRecord"""
        return ServerRecord(
            name=self._string(SlotField.NAME),
            ip=self.ip,
            port=self.port,
            map=self._string(SlotField.MAP),
            mod=self._string(SlotField.MOD),
            game_mode=self._string(SlotField.GAME_MODE),
            players_online=self._field(SlotField.PLAYERS_ONLINE),
            max_players=self._field(SlotField.MAX_PLAYERS),
        )


def iter_slots(buffer: Buffer, start: int, count: int,
               slot_size: int = constants.SLOT_SIZE) -> Iterator[CachedServerSlot]:
    """Yield count consecutive slot views beginning at start.

    A slot that would run past the end of the buffer is skipped.
    """
    view = memoryview(buffer)
    end_of_buffer = len(view)

    for index in range(count):
        offset = start + index * slot_size
        if offset < 0 or offset + slot_size > end_of_buffer:
            logger.warning(f"Slot {index} at 0x{offset:X} runs past end of buffer "
                           f"({end_of_buffer} bytes), skipping")
            continue
        yield CachedServerSlot(view[offset:offset + slot_size], offset)


def unique_records(records: Iterable[ServerRecord]) -> Iterator[ServerRecord]:
    """Drop repeated records, keeping the first occurrence of each"""
    seen = set()
    for record in records:
        if record in seen:
            continue
        seen.add(record)
        yield record
