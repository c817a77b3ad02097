#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

from io import BufferedIOBase
from typing import BinaryIO

from overrides import override

from formpart.const import (
    MACBINARY_CONTENT_TYPE,
    MACBINARY_DATA_FORK_LEN_OFFSET,
    MACBINARY_DATA_FORK_LEN_SIZE,
    MACBINARY_HEADER_SIZE,
)


class MacBinaryDecoder(BufferedIOBase):
    """
    Write-only filter that unwraps a MacBinary envelope on its way to the wrapped sink.

    A MacBinary file is a 128-byte header followed by the data fork and the
    resource fork. The header stores the data fork length as a big-endian
    32-bit integer at offsets 83 through 86. Only the data fork is passed
    through to the sink; the header and everything after the data fork are dropped.

    Input may arrive in chunks of any size, including chunks that split the header.

    Args:
        sink (BinaryIO): Writable receiving the decoded data fork. It is flushed,
            never closed, by this decoder.
    """

    content_types = (MACBINARY_CONTENT_TYPE,)

    def __init__(self, sink: BinaryIO):
        self._sink = sink
        self._bytes_filtered = 0
        self._data_fork_length = 0

    @property
    def data_fork_length(self) -> int:
        """Data fork length parsed from the header, 0 until the header has been seen."""
        return self._data_fork_length

    @property
    def bytes_filtered(self) -> int:
        """Number of input bytes seen, including those dropped."""
        return self._bytes_filtered

    @override
    def write(self, data) -> int:
        """
        Filter data, forwarding only the part that belongs to the data fork.

        Returns:
            int: Number of input bytes accepted, always the full length of data
        """
        view = memoryview(data).cast("B")
        length = len(view)
        start = self._bytes_filtered
        end = start + length

        len_start = MACBINARY_DATA_FORK_LEN_OFFSET
        len_end = len_start + MACBINARY_DATA_FORK_LEN_SIZE
        for pos in range(max(start, len_start), min(end, len_end)):
            shift = (len_end - 1 - pos) * 8
            self._data_fork_length |= view[pos - start] << shift

        fork_start = MACBINARY_HEADER_SIZE
        fork_end = fork_start + self._data_fork_length
        copy_start = max(start, fork_start)
        copy_end = min(end, fork_end)
        if copy_start < copy_end:
            self._sink.write(view[copy_start - start : copy_end - start])

        self._bytes_filtered = end
        return length

    @override
    def writable(self) -> bool:
        return True

    @override
    def readable(self) -> bool:
        return False

    @override
    def seekable(self) -> bool:
        return False

    @override
    def flush(self) -> None:
        if not self.closed and not getattr(self._sink, "closed", False):
            self._sink.flush()

    @override
    def close(self) -> None:
        """Flush the wrapped sink and mark the decoder closed, leaving the sink open."""
        super().close()
