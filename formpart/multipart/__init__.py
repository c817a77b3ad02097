from formpart.multipart.multipart_stream_buffer import MultipartStreamBuffer
from formpart.multipart.segment_reader import SegmentReader
from formpart.multipart.sliding_window_buffer import SlidingWindowBuffer
