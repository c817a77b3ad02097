#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

# Defaults
DEFAULT_CHUNK_SIZE = 8 * 1024
DEFAULT_READ_CHUNK_SIZE = 32768

# ENCODING
UTF_ENCODING = "utf-8"

# Multipart framing
MULTIPART_MARKER = b"--"
WIN_LINE_END = b"\r\n"

# Content types with a registered output transform
MACBINARY_CONTENT_TYPE = "application/x-macbinary"

# MacBinary header layout
MACBINARY_HEADER_SIZE = 128
# Data fork length is a big-endian 32-bit value at offsets 83..86
MACBINARY_DATA_FORK_LEN_OFFSET = 83
MACBINARY_DATA_FORK_LEN_SIZE = 4

# Environment Variables
FORMPART_CHUNK_SIZE = "FORMPART_CHUNK_SIZE"
FORMPART_READ_CHUNK_SIZE = "FORMPART_READ_CHUNK_SIZE"

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"
