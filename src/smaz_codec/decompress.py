"""
Smaz decompression implementation.

This module implements the decompression (decoding) side of the smaz codec.


HOW DECOMPRESSION WORKS
-----------------------
The decompressor reads the stream one code at a time and executes it:

  INDEX (0-253): "Substitute codebook entry i."
      Input:  [i]
      Action: Append CODEBOOK[i] to output.

  RUN (254): "Here are L raw bytes, copy them to output."
      Input:  [254] [L] [L bytes of data]
      Action: Append the L bytes directly to output.

  SINGLE (255): "Here is one raw byte."
      Input:  [255] [b]
      Action: Append b to output.

There is no header and no backtracking: the stream is a flat sequence of
self-delimiting codes.


Example:
-------
Compressed: [1, 0, 254, 3, 0x31, 0x32, 0x33]

Step 1: Code 1 -> "the".                Output: "the"
Step 2: Code 0 -> " ".                  Output: "the "
Step 3: Code 254, L=3 -> "123".         Output: "the 123"

Result: "the 123"


FAILURE
-------
The only way a stream can be invalid is truncation: a marker whose length
byte or payload is cut off. Decoding stops at the first such marker and
raises; no partial output is returned.
"""

from __future__ import annotations

import logging

from .encoding import decode_code
from .exceptions import TruncatedStreamError

logger = logging.getLogger(__name__)


def decompress(data: bytes | bytearray | memoryview) -> bytes:
    """Decompress a smaz code stream.

    Args:
        data: Smaz-compressed bytes.

    Returns:
        Original uncompressed data.

    Raises:
        TruncatedStreamError: If the stream ends inside a verbatim code.
    """
    output = bytearray()
    pos = 0

    while pos < len(data):
        try:
            decoded, consumed = decode_code(data, pos)
        except TruncatedStreamError as e:
            logger.debug("Rejecting stream of %d bytes: %s", len(data), e)
            raise

        output.extend(decoded)
        pos += consumed

    return bytes(output)


def get_decompressed_length(data: bytes | bytearray | memoryview) -> int:
    """Compute the decompressed size of a stream without building the output.

    Args:
        data: Smaz-compressed bytes.

    Returns:
        Number of bytes `decompress(data)` would return.

    Raises:
        TruncatedStreamError: If the stream ends inside a verbatim code.

    Smaz streams carry no length prefix, so the size is found by walking
    every code.
    """
    total = 0
    pos = 0
    while pos < len(data):
        decoded, consumed = decode_code(data, pos)
        total += len(decoded)
        pos += consumed
    return total


def is_valid_compressed_data(data: bytes | bytearray | memoryview) -> bool:
    """Check whether data is a complete smaz code stream.

    Args:
        data: Data to check.

    Returns:
        True if every code in the stream is complete.

    Every byte sequence whose markers all have their payloads is a valid
    stream, so this is exactly "decompress would succeed".
    """
    try:
        get_decompressed_length(data)
    except TruncatedStreamError:
        return False
    return True
