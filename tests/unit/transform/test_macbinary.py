#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

import io
import unittest
from unittest.mock import Mock

from formpart.const import MACBINARY_CONTENT_TYPE
from formpart.transform.macbinary import MacBinaryDecoder
from tests.utils import cases, chunked, make_macbinary, random_bytes


class TestMacBinaryDecoder(unittest.TestCase):
    def setUp(self):
        self.data_fork = random_bytes(1000)
        self.resource_fork = random_bytes(300)
        self.envelope = make_macbinary(self.data_fork, self.resource_fork)

    def test_content_types(self):
        self.assertEqual(MacBinaryDecoder.content_types, (MACBINARY_CONTENT_TYPE,))

    @cases(1, 2, 83, 84, 128, 129, 1000, 100000)
    def test_decodes_data_fork(self, chunk_size):
        sink = io.BytesIO()
        decoder = MacBinaryDecoder(sink)

        for chunk in chunked(self.envelope, chunk_size):
            self.assertEqual(decoder.write(chunk), len(chunk))

        self.assertEqual(sink.getvalue(), self.data_fork)
        self.assertEqual(decoder.data_fork_length, len(self.data_fork))
        self.assertEqual(decoder.bytes_filtered, len(self.envelope))

    def test_empty_data_fork(self):
        sink = io.BytesIO()
        decoder = MacBinaryDecoder(sink)

        decoder.write(make_macbinary(b"", b"resource"))

        self.assertEqual(sink.getvalue(), b"")

    def test_header_only(self):
        sink = io.BytesIO()
        decoder = MacBinaryDecoder(sink)

        decoder.write(self.envelope[:100])

        self.assertEqual(sink.getvalue(), b"")
        self.assertEqual(decoder.data_fork_length, len(self.data_fork))

    def test_accepts_memoryview(self):
        sink = io.BytesIO()
        decoder = MacBinaryDecoder(sink)

        decoder.write(memoryview(self.envelope))

        self.assertEqual(sink.getvalue(), self.data_fork)

    def test_close_leaves_sink_open(self):
        sink = Mock()
        sink.closed = False
        decoder = MacBinaryDecoder(sink)

        decoder.close()

        self.assertTrue(decoder.closed)
        sink.flush.assert_called()
        sink.close.assert_not_called()

    def test_close_after_sink_closed(self):
        sink = io.BytesIO()
        decoder = MacBinaryDecoder(sink)
        sink.close()

        decoder.close()

        self.assertTrue(decoder.closed)

    def test_capabilities(self):
        decoder = MacBinaryDecoder(io.BytesIO())
        self.assertTrue(decoder.writable())
        self.assertFalse(decoder.readable())
        self.assertFalse(decoder.seekable())
