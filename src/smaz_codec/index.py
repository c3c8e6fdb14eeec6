"""
Reverse index over the codebook.

The encoder needs, at every input position, the longest codebook entry that
matches there. Scanning all 254 entries per byte would be wasteful, so the
entries are bucketed by their first byte ahead of time.


LAYOUT
------
One bucket per possible byte value (256 buckets). Each bucket lists the
(index, entry) pairs whose entry starts with that byte, longest first:

    bucket[ord("t")] = (
        (100, b"their"), (210, b"there"),                   # 5 bytes
        (48, b"that"), (128, b"they"), (155, b"this"),       # 4 bytes
        (1, b"the"), (89, b"to "), (141, b"tio"), ...        # 3 bytes
        (17, b"th"), (20, b"to"), (35, b"t "), ...           # 2 bytes
        (3, b"t"),                                           # 1 byte
    )

The first candidate that matches the input is therefore the longest match.
Entries of equal length stay in codebook order, so ties resolve to the
lowest index.


SHARING
-------
The index is built once and never mutated afterwards. Every encode call
reads the same instance, from any thread, without locking.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache

from .codebook import CODEBOOK, validate_codebook

logger = logging.getLogger(__name__)

Candidate = tuple[int, bytes]
"""A codebook (index, entry) pair."""


@dataclass(frozen=True, slots=True)
class ReverseIndex:
    """Codebook entries bucketed by first byte, longest entries first."""

    buckets: tuple[tuple[Candidate, ...], ...]
    """256 buckets, one per possible leading byte value."""

    max_entry_length: int
    """Length of the longest indexed entry (0 for an empty codebook)."""

    def candidates_for(self, first_byte: int) -> tuple[Candidate, ...]:
        """Return the entries starting with `first_byte`, longest first."""
        return self.buckets[first_byte]


def build_reverse_index(entries: Sequence[bytes] = CODEBOOK) -> ReverseIndex:
    """Build a reverse index in a single pass over a codebook.

    Args:
        entries: The codebook to index.

    Returns:
        The frozen reverse index.

    Raises:
        CodebookError: If `entries` violates the codebook invariants.
    """
    validate_codebook(entries)

    # Step 1: Distribute entries into buckets by first byte.
    #
    # Iterating in index order means every bucket starts out sorted by index.
    grouped: list[list[Candidate]] = [[] for _ in range(256)]
    for index, entry in enumerate(entries):
        grouped[entry[0]].append((index, bytes(entry)))

    # Step 2: Order each bucket longest first.
    #
    # sorted() is stable, so entries of equal length keep ascending index order.
    buckets = tuple(
        tuple(sorted(bucket, key=lambda candidate: -len(candidate[1]))) for bucket in grouped
    )

    max_entry_length = max((len(entry) for entry in entries), default=0)

    logger.debug(
        "Built reverse index: %d entries over %d lead bytes, longest entry %d bytes",
        len(entries),
        sum(1 for bucket in buckets if bucket),
        max_entry_length,
    )
    return ReverseIndex(buckets=buckets, max_entry_length=max_entry_length)


@lru_cache(maxsize=None)
def get_reverse_index() -> ReverseIndex:
    """Return the shared reverse index for the built-in codebook.

    Built on first call and cached for the life of the process. Construction
    is deterministic, so concurrent first calls produce identical indexes.
    """
    return build_reverse_index(CODEBOOK)
