"""Pure Python smaz short string compression library.

Smaz compresses very short strings (URLs, labels, chat messages) where
general-purpose compressors do poorly. It replaces common substrings with
one-byte indices into a fixed codebook and escapes everything else.

Usage::

    from smaz_codec import compress, decompress

    # Compress before storing or sending
    compressed = compress(b"http://google.com")

    # Decompress on the way back
    original = decompress(compressed)

The code-stream format matches the reference smaz implementation:
https://github.com/antirez/smaz
"""

from __future__ import annotations

from .codebook import CODEBOOK, entry_at
from .compress import compress, max_compressed_length
from .decompress import decompress, get_decompressed_length, is_valid_compressed_data
from .exceptions import CodebookError, SmazError, TruncatedStreamError
from .index import ReverseIndex, build_reverse_index, get_reverse_index
from .report import CompressionReport

__all__ = [
    # Core API
    "compress",
    "decompress",
    # Codebook
    "CODEBOOK",
    "entry_at",
    "ReverseIndex",
    "build_reverse_index",
    "get_reverse_index",
    # Utilities
    "max_compressed_length",
    "get_decompressed_length",
    "is_valid_compressed_data",
    "CompressionReport",
    # Exceptions
    "SmazError",
    "TruncatedStreamError",
    "CodebookError",
]
