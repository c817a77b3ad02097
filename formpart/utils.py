#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

import logging
from pathlib import Path
from typing import Union

import humanize

from formpart.const import DEFAULT_LOG_FORMAT


def get_logger(name: str, log_format: str = DEFAULT_LOG_FORMAT):
    """
    Create or retrieve a logger with the specified configuration.

    Args:
        name (str): The name of the logger.
        log_format (str, optional): Logging format.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(log_format))
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def human_size(num_bytes: int) -> str:
    """
    Render a byte count in human-readable format for log messages.

    Args:
        num_bytes (int): Number of bytes

    Returns:
        str: Size as human-readable string, e.g. "10.0 kB"
    """
    return humanize.naturalsize(num_bytes)


def to_path(path: Union[str, Path]) -> Path:
    """
    Normalize a str or Path argument to a Path.
    """
    if isinstance(path, str):
        return Path(path)
    return path
