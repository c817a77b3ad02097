#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#


class SegmentDestinationError(OSError):
    """
    Base class for errors preparing the on-disk destination of a file segment
    """

    def __init__(self, path, err, message):
        self.path = path
        self.original_error = err
        super().__init__(f"{message}: '{path}'")


class DirectoryCreateError(SegmentDestinationError):
    """
    Raised when the parent directory of a destination does not exist and cannot be created
    """

    def __init__(self, path, err=None):
        super().__init__(path, err, "Directory does not exist and cannot be created")


class SinkOpenError(SegmentDestinationError):
    """
    Raised when the destination file cannot be opened for writing
    """

    def __init__(self, path, err=None):
        super().__init__(path, err, "Unable to open destination file for writing")


class TruncatedSegmentError(OSError):
    """
    Raised when the upload stream ends before the delimiter closing the current segment
    """

    def __init__(self, delimiter: bytes, read_total: int):
        self.delimiter = delimiter
        self.read_total = read_total
        super().__init__(
            f"Unexpected end of stream after {read_total} bytes, "
            f"delimiter {delimiter!r} not found"
        )
