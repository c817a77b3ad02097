#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict


class SegmentState(str, Enum):
    """
    Lifecycle of a file segment: its reader can be consumed only once
    """

    UNCONSUMED = "unconsumed"
    CONSUMED = "consumed"


class WriteResult(BaseModel):
    """
    Outcome of materializing a file segment

    Attributes:
        file_name (str, optional): Base name the segment was stored under, after any rename.
            None if the segment carried no file.
        path (Path, optional): Destination file, None when nothing was written to disk
        bytes_written (int): Number of bytes read from the segment
    """

    model_config = ConfigDict(frozen=True)

    file_name: Optional[str] = None
    path: Optional[Path] = None
    bytes_written: int = 0
