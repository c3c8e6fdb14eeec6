"""
The smaz codebook.

A fixed table of short byte sequences that occur often in English text,
HTML and URLs. Each entry is addressed by its position, so a single output
byte can stand for up to seven input bytes.


WIRE COMPATIBILITY
------------------
The table content AND its order are part of the format.

Any two implementations must agree on every index <-> entry pairing, or
streams produced by one cannot be read by the other. The entries below are
transcribed verbatim from the canonical smaz table; never reorder, insert,
or remove entries.

Order also matters to the encoder. Among equal-length candidates the one
with the lowest index is tried first.

Reference: https://github.com/antirez/smaz
"""

from __future__ import annotations

from collections.abc import Sequence

from .constants import MAX_CODEBOOK_SIZE, MAX_ENTRY_LENGTH, MIN_ENTRY_LENGTH
from .exceptions import CodebookError

# fmt: off
CODEBOOK: tuple[bytes, ...] = (
    # 0-9
    b" ", b"the", b"e", b"t", b"a", b"of", b"o", b"and", b"i", b"n",
    # 10-19
    b"s", b"e ", b"r", b" th", b" t", b"in", b"he", b"th", b"h", b"he ",
    # 20-29
    b"to", b"\r\n", b"l", b"s ", b"d", b" a", b"an", b"er", b"c", b" o",
    # 30-39
    b"d ", b"on", b" of", b"re", b"of ", b"t ", b", ", b"is", b"u", b"at",
    # 40-49
    b"   ", b"n ", b"or", b"which", b"f", b"m", b"as", b"it", b"that", b"\n",
    # 50-59
    b"was", b"en", b"  ", b" w", b"es", b" an", b" i", b"\r", b"f ", b"g",
    # 60-69
    b"p", b"nd", b" s", b"nd ", b"ed ", b"w", b"ed", b"http://", b"for", b"te",
    # 70-79
    b"ing", b"y ", b"The", b" c", b"ti", b"r ", b"his", b"st", b" in", b"ar",
    # 80-89
    b"nt", b",", b" to", b"y", b"ng", b" h", b"with", b"le", b"al", b"to ",
    # 90-99
    b"b", b"ou", b"be", b"were", b" b", b"se", b"o ", b"ent", b"ha", b"ng ",
    # 100-109
    b"their", b"\"", b"hi", b"from", b" f", b"in ", b"de", b"ion", b"me", b"v",
    # 110-119
    b".", b"ve", b"all", b"re ", b"ri", b"ro", b"is ", b"co", b"f t", b"are",
    # 120-129
    b"ea", b". ", b"her", b" m", b"er ", b" p", b"es ", b"by", b"they", b"di",
    # 130-139
    b"ra", b"ic", b"not", b"s, ", b"d t", b"at ", b"ce", b"la", b"h ", b"ne",
    # 140-149
    b"as ", b"tio", b"on ", b"n t", b"io", b"we", b" a ", b"om", b", a", b"s o",
    # 150-159
    b"ur", b"li", b"ll", b"ch", b"had", b"this", b"e t", b"g ", b"e\r\n", b" wh",
    # 160-169
    b"ere", b" co", b"e o", b"a ", b"us", b" d", b"ss", b"\n\r\n", b"\r\n\r", b"=\"",
    # 170-179
    b" be", b" e", b"s a", b"ma", b"one", b"t t", b"or ", b"but", b"el", b"so",
    # 180-189
    b"l ", b"e s", b"s,", b"no", b"ter", b" wa", b"iv", b"ho", b"e a", b" r",
    # 190-199
    b"hat", b"s t", b"ns", b"ch ", b"wh", b"tr", b"ut", b"/", b"have", b"ly ",
    # 200-209
    b"ta", b" ha", b" on", b"tha", b"-", b" l", b"ati", b"en ", b"pe", b" re",
    # 210-219
    b"there", b"ass", b"si", b" fo", b"wa", b"ec", b"our", b"who", b"its", b"z",
    # 220-229
    b"fo", b"rs", b">", b"ot", b"un", b"<", b"im", b"th ", b"nc", b"ate",
    # 230-239
    b"><", b"ver", b"ad", b" we", b"ly", b"ee", b" n", b"id", b" cl", b"ac",
    # 240-249
    b"il", b"</", b"rt", b" wi", b"div", b"e, ", b" it", b"whi", b" ma", b"ge",
    # 250-253
    b"x", b"e c", b"men", b".com",
)
"""The 254 codebook entries, indexed 0-253."""
# fmt: on


def entry_at(index: int) -> bytes:
    """Return the codebook entry stored at `index`.

    Args:
        index: Codebook index in [0, 253].

    Returns:
        The entry bytes.

    Raises:
        IndexError: If `index` is outside the codebook.
    """
    # Reject negatives explicitly: Python would otherwise index from the end.
    if not 0 <= index < len(CODEBOOK):
        raise IndexError(f"Codebook index {index} out of range [0, {len(CODEBOOK) - 1}]")
    return CODEBOOK[index]


def validate_codebook(entries: Sequence[bytes]) -> None:
    """Check that a table satisfies the codebook invariants.

    Args:
        entries: Candidate codebook.

    Raises:
        CodebookError: If the table is too large, an entry has an invalid
            length, or an entry appears twice.
    """
    if len(entries) > MAX_CODEBOOK_SIZE:
        raise CodebookError(f"{len(entries)} entries exceed the limit of {MAX_CODEBOOK_SIZE}")

    seen: dict[bytes, int] = {}
    for index, entry in enumerate(entries):
        if not MIN_ENTRY_LENGTH <= len(entry) <= MAX_ENTRY_LENGTH:
            raise CodebookError(
                f"length {len(entry)} outside [{MIN_ENTRY_LENGTH}, {MAX_ENTRY_LENGTH}]",
                index=index,
            )

        # A duplicate could never be emitted and would shift every later index.
        if entry in seen:
            raise CodebookError(f"duplicate of entry {seen[entry]}", index=index)
        seen[entry] = index
