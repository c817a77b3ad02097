#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

import unittest

from pydantic import ValidationError

from formpart.part import Part
from formpart.types import SegmentState, WriteResult


class TestPart(unittest.TestCase):
    def test_part(self):
        part = Part("field")
        self.assertEqual(part.name, "field")
        self.assertFalse(part.is_file())
        self.assertFalse(part.is_param())


class TestWriteResult(unittest.TestCase):
    def test_defaults(self):
        result = WriteResult()
        self.assertIsNone(result.file_name)
        self.assertIsNone(result.path)
        self.assertEqual(result.bytes_written, 0)

    def test_frozen(self):
        result = WriteResult(file_name="a.txt", bytes_written=3)
        with self.assertRaises(ValidationError):
            result.bytes_written = 4

    def test_segment_state(self):
        self.assertEqual(SegmentState("consumed"), SegmentState.CONSUMED)
