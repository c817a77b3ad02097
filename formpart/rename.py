#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

from abc import ABC, abstractmethod
from itertools import count
from pathlib import Path
from typing import Union

from formpart.utils import get_logger, to_path

logger = get_logger(__name__)


class FileRenamer(ABC):
    """
    Strategy for resolving name collisions of an upload destination.

    A renamer is invoked exactly once per write with the candidate destination
    and returns the file that should be written instead, which may be the
    candidate itself.
    """

    @abstractmethod
    def rename(self, path: Path) -> Path:
        """
        Resolve the destination for a candidate file.

        Args:
            path (Path): Candidate destination file

        Returns:
            Path: Destination to write to
        """


class SuffixFileRenamer(FileRenamer):
    """
    Renamer that avoids overwriting existing files by appending a counter to
    the file stem, e.g. "a.txt" -> "a-1.txt" -> "a-2.txt".

    When the destination directory exists the chosen name is reserved by
    creating it exclusively, so two writers cannot settle on the same name.

    Args:
        separator (str, optional): Text placed between stem and counter. Defaults to "-".
    """

    def __init__(self, separator: str = "-"):
        self._separator = separator

    @property
    def separator(self) -> str:
        return self._separator

    def rename(self, path: Union[str, Path]) -> Path:
        path = to_path(path)
        if not path.parent.is_dir():
            # Nothing can collide inside a directory that doesn't exist yet
            return path

        candidate = path
        for num in count(1):
            if self._reserve(candidate):
                if candidate != path:
                    logger.debug("Renamed '%s' to '%s'", path, candidate.name)
                return candidate
            candidate = path.with_name(
                f"{path.stem}{self._separator}{num}{path.suffix}"
            )

    @staticmethod
    def _reserve(path: Path) -> bool:
        try:
            with open(path, "xb"):
                return True
        except FileExistsError:
            return False
