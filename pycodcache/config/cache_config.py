"""
Cache Configuration - file layout and decoding behaviour
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any

from .. import constants
from .validation import validate_layout


@dataclass
class CacheConfig:
    """Server cache configuration settings"""

    # File layout
    file_size: int = constants.FILE_SIZE
    header_size: int = constants.HEADER_SIZE
    public_server_offset: int = constants.PUBLIC_SERVER_OFFSET
    favorite_server_offset: int = constants.FAVORITE_SERVER_OFFSET
    favorite_count_offset: int = constants.FAVORITE_COUNT_OFFSET

    # Decoding behaviour
    honor_favorite_count: bool = False
    skip_blank_slots: bool = True
    deduplicate: bool = True

    @property
    def public_server_count(self) -> int:
        """Number of slots in the public server region"""
        return (self.favorite_server_offset - self.public_server_offset) // constants.SLOT_SIZE

    @property
    def favorite_server_count(self) -> int:
        """Number of slots in the favorite server region"""
        return (self.file_size - self.favorite_server_offset) // constants.SLOT_SIZE

    def validate(self) -> 'CacheConfig':
        """Raise ConfigValidationError if the layout is inconsistent"""
        validate_layout(self)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CacheConfig':
        """Create from dictionary"""
        return cls(**data)

    def update(self, **kwargs):
        """Update configuration values"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
