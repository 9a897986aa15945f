"""
Configuration validation utilities
"""

from ..errors import ConfigValidationError


def validate_size(name: str, value: int) -> int:
    """Validate a strictly positive byte size"""
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigValidationError(f"{name} must be an integer")

    if value <= 0:
        raise ConfigValidationError(f"{name} must be greater than 0")

    return value


def validate_offset(name: str, value: int, file_size: int) -> int:
    """Validate an absolute file offset"""
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigValidationError(f"{name} must be an integer")

    if value < 0 or value >= file_size:
        raise ConfigValidationError(f"{name} must be between 0 and {file_size - 1}")

    return value


def validate_layout(config) -> None:
    """Validate that the regions of a layout fit together"""
    validate_size("file_size", config.file_size)
    validate_size("header_size", config.header_size)
    validate_offset("public_server_offset", config.public_server_offset, config.file_size)
    validate_offset("favorite_server_offset", config.favorite_server_offset, config.file_size)
    validate_offset("favorite_count_offset", config.favorite_count_offset, config.header_size)

    if config.public_server_offset < config.header_size:
        raise ConfigValidationError("Public server region overlaps the header")

    if config.favorite_server_offset < config.public_server_offset:
        raise ConfigValidationError("Favorite server region must follow the public server region")
