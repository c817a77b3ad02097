import os
import random
import struct
from itertools import product
from typing import Iterator, List

from formpart.const import (
    MACBINARY_DATA_FORK_LEN_OFFSET,
    MACBINARY_HEADER_SIZE,
)
from formpart.multipart import MultipartStreamBuffer, SegmentReader
from tests.const import BOUNDARY, CLOSE_DELIMITER, DELIMITER


def random_bytes(length: int = 10) -> bytes:
    return os.urandom(length)


def chunked(data: bytes, chunk_size: int) -> Iterator[bytes]:
    """Split data into chunks of chunk_size bytes, the last one possibly shorter."""
    for start in range(0, len(data), chunk_size):
        yield data[start : start + chunk_size]


def random_chunked(data: bytes, max_chunk_size: int, seed: int = 0) -> Iterator[bytes]:
    """Split data into chunks of random sizes between 1 and max_chunk_size bytes."""
    rng = random.Random(seed)
    pos = 0
    while pos < len(data):
        size = rng.randint(1, max_chunk_size)
        yield data[pos : pos + size]
        pos += size


def build_stream(*segments: bytes, last: bool = True) -> bytes:
    """
    Join segment bodies the way they follow each other on an upload stream.
    The final segment is closed with the closing delimiter if last is set.
    """
    body = b"".join(segment + DELIMITER for segment in segments)
    if last:
        body = body[: -len(DELIMITER)] + CLOSE_DELIMITER
    return body


def make_stream_buffer(
    *segments: bytes, chunk_size: int = 1024
) -> MultipartStreamBuffer:
    return MultipartStreamBuffer(chunked(build_stream(*segments), chunk_size), BOUNDARY)


def make_readers(*segments: bytes, chunk_size: int = 1024) -> List[SegmentReader]:
    """
    Readers for consecutive segments of one shared stream. They must be consumed in order.
    """
    stream_buffer = make_stream_buffer(*segments, chunk_size=chunk_size)
    return [SegmentReader(stream_buffer) for _ in segments]


def make_macbinary(data_fork: bytes, resource_fork: bytes = b"") -> bytes:
    """
    Build a MacBinary envelope: 128-byte header, data fork padded to 128 bytes,
    then the resource fork.
    """
    header = bytearray(MACBINARY_HEADER_SIZE)
    header[1] = 8
    header[2:10] = b"test.bin"
    struct.pack_into(">I", header, MACBINARY_DATA_FORK_LEN_OFFSET, len(data_fork))
    struct.pack_into(">I", header, MACBINARY_DATA_FORK_LEN_OFFSET + 4, len(resource_fork))
    padding = b"\x00" * (-len(data_fork) % MACBINARY_HEADER_SIZE)
    return bytes(header) + data_fork + padding + resource_fork


def cases(*args):
    def decorator(func):
        def wrapper(self, *inner_args, **kwargs):
            for arg in args:
                with self.subTest(arg=arg):
                    func(self, arg, *inner_args, **kwargs)

        return wrapper

    return decorator


def case_matrix(*args_list):
    def decorator(func):
        def wrapper(self, *inner_args, **kwargs):
            for args in product(*args_list):
                with self.subTest(args=args):
                    func(self, *args, *inner_args, **kwargs)

        return wrapper

    return decorator
