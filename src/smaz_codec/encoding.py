"""
Encoding utilities for the smaz code-stream format.

This module provides the low-level primitives shared by the compressor and
decompressor:

1. **Verbatim encoding**: Packing a span of unmatched bytes into one
   single-byte escape or a sequence of counted runs.

2. **Code decoding**: Interpreting the single code that starts at a given
   stream position.
"""

from __future__ import annotations

from .codebook import CODEBOOK
from .constants import MAX_RUN_LENGTH, VERBATIM_RUN, VERBATIM_SINGLE
from .exceptions import TruncatedStreamError

# Verbatim Encoding
#
# Bytes that no codebook entry covers are buffered and written out in one go
# as soon as a match (or the end of input) interrupts them.
#
#   1 byte:       [255] [b]                       2 bytes total
#   2+ bytes:     [254] [L] [b1 ... bL]           L + 2 bytes per chunk
#
# A run's length fits in one byte, so spans longer than 255 bytes become
# several back-to-back runs.
#
# Example: 300 unmatched bytes
#
#   Chunk 1: [254] [255] [255 bytes]
#   Chunk 2: [254] [45]  [45 bytes]
#
#   Encoded: 2 + 255 + 2 + 45 = 304 bytes


def encode_verbatim(buffer: bytes | bytearray) -> bytes:
    """Encode a span of raw bytes as verbatim codes.

    Args:
        buffer: The unmatched bytes (may be empty).

    Returns:
        The encoded codes (empty for an empty buffer).
    """
    if not buffer:
        return b""

    # A lone byte uses the 2-byte escape instead of a 3-byte run.
    if len(buffer) == 1:
        return bytes((VERBATIM_SINGLE, buffer[0]))

    output = bytearray()
    for start in range(0, len(buffer), MAX_RUN_LENGTH):
        chunk = buffer[start : start + MAX_RUN_LENGTH]
        output.append(VERBATIM_RUN)
        output.append(len(chunk))
        output.extend(chunk)
    return bytes(output)


def decode_code(data: bytes | bytearray | memoryview, pos: int = 0) -> tuple[bytes, int]:
    """Decode the single code starting at `pos`.

    Args:
        data: The code stream.
        pos: Offset of the code byte. Must be < len(data).

    Returns:
        Tuple of (decoded_bytes, bytes_consumed).

    Raises:
        TruncatedStreamError: If a marker's payload extends past the end of
            `data`.

    Code layouts:

        [i]                  i in 0..253   -> CODEBOOK[i]
        [254] [L] [L bytes]                -> the L bytes
        [255] [b]                          -> b
    """
    code = data[pos]
    remaining = len(data) - pos - 1

    if code == VERBATIM_SINGLE:
        # SINGLE: exactly one raw byte follows.
        if remaining < 1:
            raise TruncatedStreamError(pos, code, needed=1, available=remaining)
        return bytes(data[pos + 1 : pos + 2]), 2

    if code == VERBATIM_RUN:
        # RUN: a length byte, then that many raw bytes.
        #
        # Example:
        #   data[pos:] = [254, 3, 0x31, 0x32, 0x33]
        #   -> length = 3, payload = b"123", consumed = 5
        if remaining < 1:
            raise TruncatedStreamError(pos, code, needed=1, available=remaining)

        length = data[pos + 1]
        if remaining - 1 < length:
            raise TruncatedStreamError(pos, code, needed=1 + length, available=remaining)
        return bytes(data[pos + 2 : pos + 2 + length]), 2 + length

    # INDEX: substitute the codebook entry.
    return CODEBOOK[code], 1
