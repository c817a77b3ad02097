import logging

from formpart.config import SegmentConfig
from formpart.errors import (
    DirectoryCreateError,
    SegmentDestinationError,
    SinkOpenError,
    TruncatedSegmentError,
)
from formpart.file_segment import FileSegment
from formpart.multipart import MultipartStreamBuffer, SegmentReader
from formpart.part import Part
from formpart.rename import FileRenamer, SuffixFileRenamer
from formpart.transform import MacBinaryDecoder, TransformRegistry
from formpart.types import SegmentState, WriteResult

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s: %(message)s")

__version__ = "1.0.0"
