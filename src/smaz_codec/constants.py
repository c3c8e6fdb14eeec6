"""
Constants for the smaz code-stream format.

Reference: https://github.com/antirez/smaz
"""

from __future__ import annotations

# ===========================================================================
# Code Byte Ranges
# ===========================================================================
#
# Every byte of a code stream is read as one of three things:
#
#   0 .. 253   Codebook index. Substitute the entry stored at that index.
#   254        Verbatim run. Next byte is a length L, then L raw bytes.
#   255        Verbatim single. Exactly one raw byte follows.

MAX_CODEBOOK_SIZE: int = 254
"""Maximum number of codebook entries.

Indices 0-253 address entries. The two remaining byte values are markers.
"""

VERBATIM_RUN: int = 254
"""Marker introducing a counted run of raw bytes.

Layout: [254] [L] [L raw bytes], with 1 <= L <= 255.
"""

VERBATIM_SINGLE: int = 255
"""Marker introducing exactly one raw byte.

Layout: [255] [raw byte]. Cheaper than a run by one byte for lone literals.
"""

# ===========================================================================
# Limits
# ===========================================================================

MAX_RUN_LENGTH: int = 255
"""Largest run a single length byte can describe.

Longer literal spans are split into several consecutive runs.
"""

MAX_ENTRY_LENGTH: int = 7
"""Longest codebook entry, in bytes ("http://").

Bounds how far the encoder ever looks ahead from its cursor.
"""

MIN_ENTRY_LENGTH: int = 1
"""Shortest codebook entry, in bytes. Empty entries would never advance input."""
