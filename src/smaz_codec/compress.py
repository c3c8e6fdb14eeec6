"""
Smaz compression implementation.

This module implements the compression (encoding) side of the smaz codec.


WHAT IS SMAZ?
-------------
Smaz is a codebook compressor for very short strings.

General-purpose compressors (zlib, Snappy, ...) learn repetitions from the
input itself. A 20-byte URL has almost nothing to learn from, and the
per-stream headers often make the output LARGER than the input.

Smaz instead ships its knowledge up front: a fixed table of 254 substrings
that are common in English text, HTML and URLs. Each table hit costs a
single output byte.


HOW COMPRESSION WORKS
---------------------
The encoder walks the input left to right with a cursor.

At each position it asks: "what is the longest codebook entry that starts
here?"

  - Match found:    emit the entry's index (1 byte), jump past the match.
  - No match:       remember the byte as a pending literal, advance by 1.

Pending literals are written out as verbatim codes just before the next
match, and once more at the end of input.


Example:
-------
Input:  "the end" (7 bytes)

    Position 0: "the" matches entry 1            -> [1]
    Position 3: " e" matches entry 171           -> [171]
    Position 5: "nd" matches entry 61            -> [61]

Output: [1, 171, 61] (3 bytes, saved 4 bytes).


GREEDY MATCHING
---------------
The longest match at the cursor always wins, even when a shorter match
would lead to a better overall encoding. This choice is part of the format:
every implementation must produce the same bytes for the same input.

Reference: https://github.com/antirez/smaz
"""

from __future__ import annotations

from .encoding import encode_verbatim
from .index import Candidate, ReverseIndex, get_reverse_index


def compress(data: bytes | bytearray | memoryview) -> bytes:
    """Compress data using the smaz codebook.

    Args:
        data: Uncompressed input bytes.

    Returns:
        Smaz code stream. Empty input yields empty output.

    Never raises for bytes-like input: bytes the codebook does not cover are
    carried through verbatim.
    """
    data = bytes(data)
    index = get_reverse_index()

    output = bytearray()

    # Bytes seen since the last match that no entry covered.
    literals = bytearray()

    pos = 0
    while pos < len(data):
        # Step 1: Find the longest codebook entry starting at the cursor.
        match = _longest_match(index, data, pos)

        if match is not None:
            code, entry = match

            # Step 2: Flush pending literals BEFORE the index byte.
            #
            # Stream order must mirror input order.
            output.extend(encode_verbatim(literals))
            literals.clear()

            # Step 3: Emit the index and jump past the matched bytes.
            output.append(code)
            pos += len(entry)
        else:
            # No entry starts with these bytes.
            #
            # The byte joins the literal run.
            literals.append(data[pos])
            pos += 1

    # Flush whatever literal run is still pending at end of input.
    output.extend(encode_verbatim(literals))

    return bytes(output)


def max_compressed_length(source_bytes: int) -> int:
    """Calculate an upper bound on the compressed length for an input size.

    Args:
        source_bytes: Uncompressed data size.

    Returns:
        Maximum possible compressed size.

    Every input byte costs at most one output byte, plus a 2-byte header per
    verbatim chunk. Two chunks are separated either by a matched code or by
    a full 255-byte chunk, so there are at most (n + 1) // 2 chunks.
    """
    if source_bytes < 0:
        raise ValueError(f"source_bytes must be non-negative, got {source_bytes}")
    return source_bytes + 2 * ((source_bytes + 1) // 2)


def _longest_match(index: ReverseIndex, data: bytes, pos: int) -> Candidate | None:
    """Find the longest codebook entry matching `data` at `pos`.

    Args:
        index: Reverse index to search.
        data: Input data.
        pos: Cursor position (must be < len(data)).

    Returns:
        The (index, entry) pair of the longest match, or None.

    Candidates are ordered longest first with ties in codebook order, so the
    first hit is the answer.

    Example:
        data = b"there", pos = 0

        Candidates for "t": b"their" (no), b"there" (yes!) -> (210, b"there")
    """
    # No entry is longer than the index's longest, so never look further ahead.
    #
    # Near the end of input the window is shorter, and entries longer than
    # the remaining bytes simply fail to match.
    window = data[pos : pos + index.max_entry_length]

    for candidate in index.candidates_for(data[pos]):
        if window.startswith(candidate[1]):
            return candidate
    return None
