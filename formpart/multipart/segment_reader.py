#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

from io import BufferedIOBase

from overrides import override

from formpart.const import DEFAULT_READ_CHUNK_SIZE
from formpart.multipart.multipart_stream_buffer import MultipartStreamBuffer


class SegmentReader(BufferedIOBase):
    """
    Read-only, non-seekable view over a single segment of a shared multipart stream.

    Reads return data until the segment's delimiter is reached, then `b""` for
    every later call. The reader must be read to exhaustion (or drained) before
    the next segment of the shared stream is read.

    Args:
        stream_buffer (MultipartStreamBuffer): The shared upload stream, positioned
            at the start of this segment's content
    """

    def __init__(self, stream_buffer: MultipartStreamBuffer):
        self._stream_buffer = stream_buffer
        self._exhausted = False
        self._bytes_read = 0

    @property
    def exhausted(self) -> bool:
        """True once the end of the segment has been reached or the reader closed."""
        return self._exhausted

    @property
    def bytes_read(self) -> int:
        """Number of segment bytes returned so far."""
        return self._bytes_read

    @override
    def read(self, size: int = -1) -> bytes:
        """
        Read up to size bytes from the segment.

        Args:
            size (int): Number of bytes to read. If size is omitted, None, or
                negative read the rest of the segment. Defaults to -1.

        Returns:
            bytes: Data read from the segment, `b""` once exhausted.
        """
        if self._exhausted or size == 0:
            return b""

        if size is None or size < 0:
            result = bytearray()
            chunk = self._read_chunk(DEFAULT_READ_CHUNK_SIZE)
            while chunk:
                result.extend(chunk)
                chunk = self._read_chunk(DEFAULT_READ_CHUNK_SIZE)
            return bytes(result)

        return self._read_chunk(size)

    @override
    def read1(self, size: int = -1) -> bytes:
        return self.read(size)

    @override
    def readinto(self, buffer) -> int:
        """
        Read segment bytes directly into a pre-allocated writable buffer.

        Returns:
            int: Number of bytes read, 0 once exhausted.
        """
        view = memoryview(buffer).cast("B")
        data = self.read(len(view))
        view[: len(data)] = data
        return len(data)

    def _read_chunk(self, size: int) -> bytes:
        if self._exhausted:
            return b""
        try:
            data = self._stream_buffer.read_segment(size)
        except Exception:
            # The shared stream cannot be resynchronized after a failed read
            self._exhausted = True
            raise
        if not data:
            self._exhausted = True
        self._bytes_read += len(data)
        return data

    def drain(self) -> int:
        """
        Read and discard the rest of the segment, leaving the shared stream at the next segment.

        Returns:
            int: Number of bytes discarded
        """
        skipped = 0
        chunk = self._read_chunk(DEFAULT_READ_CHUNK_SIZE)
        while chunk:
            skipped += len(chunk)
            chunk = self._read_chunk(DEFAULT_READ_CHUNK_SIZE)
        return skipped

    @override
    def readable(self) -> bool:
        """Return True if the stream is readable."""
        return True

    @override
    def close(self) -> None:
        """
        Close the reader. The shared stream is left untouched; call `drain` first
        when later segments still need to be read.
        """
        self._exhausted = True
        super().close()

    @override
    def seekable(self) -> bool:
        """Return False as this stream does not support seeking."""
        return False

    @override
    def writable(self) -> bool:
        """Return False as this stream is read-only."""
        return False
