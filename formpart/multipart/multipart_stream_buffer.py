#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

from typing import BinaryIO, Iterator, Optional, Union

from requests.models import Response

from formpart.config import SegmentConfig
from formpart.const import (
    DEFAULT_READ_CHUNK_SIZE,
    MULTIPART_MARKER,
    UTF_ENCODING,
    WIN_LINE_END,
)
from formpart.errors import TruncatedSegmentError
from formpart.multipart.sliding_window_buffer import SlidingWindowBuffer
from formpart.utils import get_logger

logger = get_logger(__name__)


class MultipartStreamBuffer:
    """
    The shared, forward-only upload stream that all segments of one request are read from.

    Segments follow each other on the stream, each one terminated by the delimiter
    `CRLF + "--" + boundary`. Content is pulled from the source iterator lazily and
    never read past what is needed to decide whether the delimiter has been reached.

    Args:
        content_iter (Iterator[bytes]): Iterator yielding chunks of the upload stream
        boundary (Union[str, bytes]): The multipart boundary, without leading dashes
        encoding (str, optional): Encoding used when the boundary is given as str.
            Defaults to "utf-8".

    Notes:
        This class is not thread-safe, and only one segment may be read at a time.
    """

    def __init__(
        self,
        content_iter: Iterator[bytes],
        boundary: Union[str, bytes],
        encoding: str = UTF_ENCODING,
    ):
        if isinstance(boundary, str):
            boundary = boundary.encode(encoding)
        if not boundary:
            raise ValueError("Boundary must be a non-empty value")

        self._content_iter = iter(content_iter)
        self._delimiter = WIN_LINE_END + MULTIPART_MARKER + boundary
        self._exhausted = False
        self._segment_total = 0
        self._buffer = SlidingWindowBuffer(DEFAULT_READ_CHUNK_SIZE)

    @classmethod
    def from_response(
        cls,
        response: Response,
        boundary: Union[str, bytes],
        chunk_size: Optional[int] = None,
    ) -> "MultipartStreamBuffer":
        """
        Create a stream over the body of a streaming HTTP response.

        Args:
            response (Response): Response opened with `stream=True`
            boundary (Union[str, bytes]): The multipart boundary
            chunk_size (int, optional): Size of chunks pulled from the response.
                Defaults to `SegmentConfig().read_chunk_size`.

        Returns:
            MultipartStreamBuffer: Stream positioned at the start of the response body
        """
        chunk_size = SegmentConfig(read_chunk_size=chunk_size).read_chunk_size
        return cls(response.iter_content(chunk_size=chunk_size), boundary)

    @classmethod
    def from_file(
        cls,
        fileobj: BinaryIO,
        boundary: Union[str, bytes],
        chunk_size: Optional[int] = None,
    ) -> "MultipartStreamBuffer":
        """
        Create a stream over a binary file-like object, starting at its current position.
        """
        chunk_size = SegmentConfig(read_chunk_size=chunk_size).read_chunk_size
        return cls(iter(lambda: fileobj.read(chunk_size), b""), boundary)

    @property
    def delimiter(self) -> bytes:
        """
        Get the full delimiter token that terminates each segment.

        Returns:
            bytes: The delimiter, including the leading line ending and dashes
        """
        return self._delimiter

    @property
    def exhausted(self) -> bool:
        """True when the source is drained and nothing is left buffered."""
        return self._exhausted and len(self._buffer) == 0

    def _read_next_chunk(self) -> bool:
        """
        Read one chunk from content iterator into buffer.

        Returns:
            bool: True if chunk read successfully, False if iterator exhausted
        """
        if self._exhausted:
            return False

        try:
            chunk = next(self._content_iter)
        except StopIteration:
            self._exhausted = True
            return False
        self._buffer.append(chunk)
        return True

    def _fill_buffer(self, min_size: int) -> None:
        while len(self._buffer) < min_size and self._read_next_chunk():
            pass

    def read_segment(self, size: int) -> bytes:
        """
        Read up to size bytes of the current segment without crossing its delimiter.

        Once the delimiter is reached it is consumed and `b""` is returned, leaving
        the stream positioned at the start of the following segment. Callers must
        therefore stop reading a segment after the first empty result.

        Args:
            size (int): Maximum number of bytes to return, must be positive

        Returns:
            bytes: Segment content, or `b""` at the end of the segment

        Raises:
            ValueError: If size is not positive
            TruncatedSegmentError: If the stream ends before the delimiter
        """
        if size <= 0:
            raise ValueError(f"Invalid read size (must be a positive integer): {size}.")

        delimiter_len = len(self._delimiter)
        # Enough lookahead to know whether the delimiter starts within the next size bytes
        self._fill_buffer(size + delimiter_len - 1)

        pos = self._buffer.find(self._delimiter, 0, size + delimiter_len - 1)
        if pos == 0:
            self._buffer.consume(delimiter_len)
            logger.debug(
                "Reached delimiter after %d segment bytes", self._segment_total
            )
            self._segment_total = 0
            return b""
        if pos > 0:
            return self._consume_segment(min(pos, size))

        if len(self._buffer) == 0:
            raise TruncatedSegmentError(self._delimiter, self._segment_total)
        # No delimiter starts within the first size bytes, so all of them are segment data
        return self._consume_segment(min(size, len(self._buffer)))

    def _consume_segment(self, length: int) -> bytes:
        data = self._buffer.consume(length)
        self._segment_total += len(data)
        return data
