"""
Install detection - locates servercache.dat of an installed Call of Duty 4
"""

import logging
import os
import sys
from typing import Optional

from .cache import ServerCache
from .config import CacheConfig

logger = logging.getLogger(__name__)

CACHE_FILENAME = "servercache.dat"
INSTALL_PATH_ENV = "COD4_INSTALL_PATH"

REGISTRY_KEYS = [
    r"SOFTWARE\Activision\Call of Duty 4",
    r"SOFTWARE\Wow6432Node\Activision\Call of Duty 4",
]
REGISTRY_VALUE = "InstallPath"


def _read_registry_install_path() -> Optional[str]:
    """Read InstallPath from HKLM, trying the 32-bit view second"""
    if sys.platform != "win32":
        return None

    import winreg

    for key_path in REGISTRY_KEYS:
        try:
            with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, key_path) as key:
                value, _ = winreg.QueryValueEx(key, REGISTRY_VALUE)
        except OSError:
            logger.debug(f"No {REGISTRY_VALUE} under HKLM\\{key_path}")
            continue
        if value:
            logger.debug(f"Found install path in HKLM\\{key_path}: {value}")
            return str(value)

    return None


def find_install_path() -> Optional[str]:
    """Find the game install directory.

    Checks the COD4_INSTALL_PATH environment variable first, then the
    Windows registry.

    Returns:
        Install directory, or None if the game could not be found
    """
    path = os.environ.get(INSTALL_PATH_ENV)
    if path:
        logger.debug(f"Using install path from {INSTALL_PATH_ENV}: {path}")
        return path

    return _read_registry_install_path()


def find_cache_path() -> Optional[str]:
    """Get the path of servercache.dat if it exists"""
    install_path = find_install_path()
    if install_path is None:
        logger.info("Call of Duty 4 install path not found")
        return None

    path = os.path.join(install_path, CACHE_FILENAME)
    if not os.path.isfile(path):
        logger.info(f"No {CACHE_FILENAME} in {install_path}")
        return None

    return path


def detect_cache(config: Optional[CacheConfig] = None) -> Optional[ServerCache]:
    """Load the cache file of the installed game.

    Returns:
        A ServerCache, or None if the game or its cache could not be found

    Raises:
        InvalidSizeError: If a cache file was found but has the wrong size
    """
    path = find_cache_path()
    if path is None:
        return None
    return ServerCache(path, config)
