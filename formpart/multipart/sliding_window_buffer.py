#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

from typing import Optional


class SlidingWindowBuffer:
    """
    Byte window over a forward-only stream: data is appended at the end and
    consumed from the front.

    Consumed space at the front is reclaimed by compaction before the backing
    storage is grown, so the allocation stays close to the largest amount of
    unconsumed data ever held.

    Args:
        initial_size (int): Initial capacity of the backing storage

    Notes:
        ```
        buffer: [consumed data][----valid data----][unused space]
                               ^start_pos        ^end_pos
        ```
        This class is not thread-safe. Concurrent access requires external
        synchronization.
    """

    def __init__(self, initial_size: int):
        self.buffer = bytearray(max(initial_size, 1))
        self.start_pos = 0
        self.end_pos = 0
        self.total_consumed = 0

    def append(self, data: bytes) -> None:
        """
        Append data to the end of the window, compacting or growing storage as needed.

        Args:
            data (bytes): Data to append to the buffer
        """
        data_len = len(data)
        if not data_len:
            return

        if self.end_pos + data_len > len(self.buffer):
            self._compact_buffer()

            if self.end_pos + data_len > len(self.buffer):
                new_size = max(len(self.buffer) * 2, self.end_pos + data_len)
                new_buffer = bytearray(new_size)
                new_buffer[: self.end_pos] = memoryview(self.buffer)[: self.end_pos]
                self.buffer = new_buffer

        self.buffer[self.end_pos : self.end_pos + data_len] = data
        self.end_pos += data_len

    def _compact_buffer(self) -> None:
        """Move valid data to the beginning of the storage."""
        current_data_len = self.end_pos - self.start_pos
        if self.start_pos > 0:
            if current_data_len > 0:
                source = memoryview(self.buffer)[self.start_pos : self.end_pos]
                self.buffer[:current_data_len] = source
            self.start_pos = 0
            self.end_pos = current_data_len

    def find(self, pattern: bytes, start: int = 0, end: Optional[int] = None) -> int:
        """
        Find pattern in the window.

        Args:
            pattern (bytes): Pattern to search for
            start (int): Starting offset for search. Defaults to 0.
            end (int, optional): Offset the match must end at or before, None for end of window.

        Returns:
            int: Position relative to the window start, -1 if not found
        """
        search_start = self.start_pos + start
        search_end = self.end_pos if end is None else min(self.end_pos, self.start_pos + end)
        if search_start >= search_end:
            return -1

        pos = self.buffer.find(pattern, search_start, search_end)
        return pos - self.start_pos if pos != -1 else -1

    def peek(self, length: Optional[int] = None) -> bytes:
        """
        Copy up to length bytes from the front of the window without consuming them.

        Args:
            length (int, optional): Number of bytes, None for all valid data

        Returns:
            bytes: Copy of the requested data
        """
        end = self.end_pos if length is None else min(self.end_pos, self.start_pos + length)
        return memoryview(self.buffer)[self.start_pos : end].tobytes()

    def consume(self, length: int) -> bytes:
        """
        Consume and return data from the front of the window.

        Args:
            length (int): Number of bytes to consume

        Returns:
            bytes: Consumed data
        """
        if length <= 0:
            return b""

        actual_length = min(length, self.end_pos - self.start_pos)
        consumed = memoryview(self.buffer)[
            self.start_pos : self.start_pos + actual_length
        ].tobytes()
        self.start_pos += actual_length
        self.total_consumed += actual_length

        if self.start_pos == self.end_pos:
            self.start_pos = self.end_pos = 0
        return consumed

    def __len__(self) -> int:
        """
        Return current logical length of valid data in buffer.

        Returns:
            int: Number of bytes of valid data
        """
        return self.end_pos - self.start_pos

    def clear(self) -> None:
        """Drop all valid data and update the consumed byte counter."""
        self.total_consumed += self.end_pos - self.start_pos
        self.start_pos = 0
        self.end_pos = 0
