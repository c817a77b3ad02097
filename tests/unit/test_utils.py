#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

import logging
import unittest
from pathlib import Path

from formpart.utils import get_logger, human_size, to_path


class TestUtils(unittest.TestCase):
    def test_get_logger(self):
        logger = get_logger("formpart.test")

        self.assertEqual(logger.name, "formpart.test")
        self.assertFalse(logger.propagate)
        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0], logging.StreamHandler)

    def test_get_logger_reuses_handler(self):
        get_logger("formpart.test.reuse")
        logger = get_logger("formpart.test.reuse")
        self.assertEqual(len(logger.handlers), 1)

    def test_human_size(self):
        self.assertEqual(human_size(10000), "10.0 kB")
        self.assertEqual(human_size(1), "1 Byte")

    def test_to_path(self):
        path = Path("/tmp/a")
        self.assertIs(to_path(path), path)
        self.assertEqual(to_path("/tmp/a"), path)
