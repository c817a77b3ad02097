#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

import os
import warnings
from dataclasses import dataclass
from typing import Optional

from formpart.const import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_READ_CHUNK_SIZE,
    FORMPART_CHUNK_SIZE,
    FORMPART_READ_CHUNK_SIZE,
)


def _parse_size_from_env(env_var_name: str, default_value: int) -> int:
    """
    Parse a positive byte size from an environment variable.

    Args:
        env_var_name: Name of the environment variable to read
        default_value: Default value to use if not set or parsing fails

    Returns:
        Parsed size, or default if unset or invalid
    """
    env_value = os.environ.get(env_var_name)

    if not env_value:
        return default_value

    try:
        parsed = int(env_value)
    except (ValueError, TypeError):
        parsed = 0
    if parsed <= 0:
        warnings.warn(
            f"Invalid value for {env_var_name}='{env_value}'. "
            f"Using default size of {default_value} bytes."
        )
        return default_value
    return parsed


def _resolve_size(value: Optional[int], env_var_name: str, default_value: int) -> int:
    """
    Priority: explicit parameter > environment variable > default
    """
    if value is None:
        return _parse_size_from_env(env_var_name, default_value)
    if value <= 0:
        raise ValueError(f"Invalid size (must be a positive integer): {value}.")
    return value


@dataclass
class SegmentConfig:
    """
    Configuration for reading and materializing upload segments

    Attributes:
        chunk_size (int, optional): Number of bytes moved per iteration of the copy loop.
            Falls back to the 'FORMPART_CHUNK_SIZE' environment variable, then 8 KiB.
        read_chunk_size (int, optional): Number of bytes pulled at a time from the
            underlying upload source. Falls back to 'FORMPART_READ_CHUNK_SIZE', then 32 KiB.

    Example:
        config = SegmentConfig(chunk_size=64 * 1024)
    """

    chunk_size: Optional[int] = None
    read_chunk_size: Optional[int] = None

    def __post_init__(self):
        self.chunk_size = _resolve_size(
            self.chunk_size, FORMPART_CHUNK_SIZE, DEFAULT_CHUNK_SIZE
        )
        self.read_chunk_size = _resolve_size(
            self.read_chunk_size, FORMPART_READ_CHUNK_SIZE, DEFAULT_READ_CHUNK_SIZE
        )

    @classmethod
    def from_env(cls) -> "SegmentConfig":
        """
        Build a config using only environment variables and defaults.
        """
        return cls()
