#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#


class Part:
    """
    A single named part of a multipart upload.

    Args:
        name (str): Name of the form field the part was sent as
    """

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        """Name of the form field, not to be confused with an uploaded file's name."""
        return self._name

    def is_file(self) -> bool:
        """True if this part carries an uploaded file."""
        return False

    def is_param(self) -> bool:
        """True if this part carries a plain form value."""
        return False
