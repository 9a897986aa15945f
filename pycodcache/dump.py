#!/usr/bin/env python3
"""
Cache Dump - hex dump of server cache slots for format debugging

Usage:
    pycodcache-dump
    pycodcache-dump path/to/servercache.dat -o out.txt
    pycodcache-dump --favorites --width 0x9c
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from .cache import CachedServerSlot, ServerCache
from .config import CacheConfig
from .constants import SLOT_SIZE
from .detect import detect_cache
from .errors import CacheError
from .utils import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 0x31  # Everything before the name field


def format_ruler(width: int) -> str:
    """Column index line lining up with the hex dump"""
    return "  " + "".join(f"{i:02X}" for i in range(width))


def format_slot(slot: CachedServerSlot, width: int) -> str:
    """One dump line: leading slot bytes as hex, then name and address"""
    record = slot.decode()
    return f"0x{slot.data[:width].hex().upper()}{record.name} {record.address}"


def write_dump(cache: ServerCache, out: TextIO, width: int = DEFAULT_WIDTH,
               favorites: bool = False) -> int:
    """Write the dump of one region to out.

    Returns:
        Number of slots written
    """
    slots: Iterable[CachedServerSlot] = cache.favorite_slots() if favorites else cache.public_slots()

    out.write(f"0x{cache.header.hex().upper()}\n")
    out.write(format_ruler(width) + "\n")

    count = 0
    for slot in slots:
        out.write(format_slot(slot, width) + "\n")
        count += 1
    return count


def _parse_width(value: str) -> int:
    width = int(value, 0)
    if width < 1 or width > SLOT_SIZE:
        raise argparse.ArgumentTypeError(f"width must be between 1 and {SLOT_SIZE}")
    return width


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dump Call of Duty 4 server cache slots")
    parser.add_argument("path", nargs="?", help="Path to servercache.dat (detected if omitted)")
    parser.add_argument("-o", "--output", help="Write the dump to this file instead of stdout")
    parser.add_argument("--favorites", action="store_true", help="Dump the favorites region")
    parser.add_argument("--width", type=_parse_width, default=DEFAULT_WIDTH,
                        help="Bytes of each slot to show (default: 0x31)")
    parser.add_argument("--honor-favorite-count", action="store_true",
                        help="Limit favorites to the count stored in the header")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    config = CacheConfig(honor_favorite_count=args.honor_favorite_count)

    try:
        if args.path:
            cache = ServerCache(args.path, config)
        else:
            cache = detect_cache(config)
    except CacheError as e:
        logger.error(f"Failed to load server cache: {e}")
        return 1

    if cache is None:
        logger.error("Could not find servercache.dat, pass its path explicitly")
        return 1

    if args.output:
        with open(args.output, "w", encoding="latin-1", newline="\n") as f:
            count = write_dump(cache, f, args.width, args.favorites)
    else:
        # Names are raw Latin-1, a narrower console gets "?" instead of an error
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(errors="replace")
        count = write_dump(cache, sys.stdout, args.width, args.favorites)

    region = "favorite" if args.favorites else "public"
    logger.info(f"Dumped {count} {region} slots")
    return 0


if __name__ == "__main__":
    sys.exit(main())
