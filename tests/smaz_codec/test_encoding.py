"""Tests for the low-level code-stream primitives."""

from __future__ import annotations

import pytest

from smaz_codec import TruncatedStreamError
from smaz_codec.constants import VERBATIM_RUN, VERBATIM_SINGLE
from smaz_codec.encoding import decode_code, encode_verbatim


class TestEncodeVerbatim:
    """Tests for packing unmatched bytes."""

    def test_empty_buffer(self) -> None:
        """Nothing pending encodes to nothing."""
        assert encode_verbatim(b"") == b""

    def test_single_byte_uses_escape(self) -> None:
        """A lone byte is [255, byte]."""
        assert encode_verbatim(b"Q") == bytes([VERBATIM_SINGLE, ord("Q")])

    def test_short_run(self) -> None:
        """Two or more bytes form a counted run."""
        assert encode_verbatim(b"12") == bytes([VERBATIM_RUN, 2]) + b"12"

    def test_full_run(self) -> None:
        """255 bytes still fit one run."""
        buffer = b"\x00" * 255
        assert encode_verbatim(buffer) == bytes([VERBATIM_RUN, 255]) + buffer

    def test_run_split_at_255(self) -> None:
        """Longer spans split into 255-byte chunks plus the remainder."""
        encoded = encode_verbatim(b"\x00" * 300)
        assert encoded == (
            bytes([VERBATIM_RUN, 255]) + b"\x00" * 255 + bytes([VERBATIM_RUN, 45]) + b"\x00" * 45
        )

    def test_one_byte_remainder_stays_a_run(self) -> None:
        """A trailing 1-byte chunk of a long span is still a counted run."""
        encoded = encode_verbatim(b"\x01" * 256)
        assert encoded[-3:] == bytes([VERBATIM_RUN, 1, 1])
        assert len(encoded) == 2 + 255 + 2 + 1

    def test_accepts_bytearray(self) -> None:
        """The compressor passes its bytearray buffer directly."""
        assert encode_verbatim(bytearray(b"ab")) == b"\xfe\x02ab"


class TestDecodeCode:
    """Tests for interpreting one code."""

    def test_index_code(self) -> None:
        """Index bytes substitute their entry."""
        assert decode_code(b"\x01") == (b"the", 1)
        assert decode_code(b"\xfd") == (b".com", 1)

    def test_single_code(self) -> None:
        """The single escape yields one byte and consumes two."""
        assert decode_code(b"\xffA") == (b"A", 2)

    def test_run_code(self) -> None:
        """A run yields its payload and consumes header plus payload."""
        assert decode_code(b"\xfe\x03123\x00") == (b"123", 5)

    def test_zero_length_run(self) -> None:
        """A zero-length run decodes to nothing."""
        assert decode_code(b"\xfe\x00") == (b"", 2)

    def test_offset(self) -> None:
        """Decoding can start mid-stream."""
        assert decode_code(b"\x01\xffZ", pos=1) == (b"Z", 2)

    def test_missing_single_payload(self) -> None:
        """A single escape at the end of the stream is truncated."""
        with pytest.raises(TruncatedStreamError) as exc_info:
            decode_code(b"\x01\xff", pos=1)
        error = exc_info.value
        assert (error.position, error.marker, error.needed, error.available) == (1, 255, 1, 0)

    def test_missing_run_length(self) -> None:
        """A run marker without its length byte is truncated."""
        with pytest.raises(TruncatedStreamError) as exc_info:
            decode_code(b"\xfe")
        error = exc_info.value
        assert (error.position, error.marker, error.needed, error.available) == (0, 254, 1, 0)

    def test_short_run_payload(self) -> None:
        """A run claiming more bytes than remain is truncated."""
        with pytest.raises(TruncatedStreamError, match="needs 6 more bytes") as exc_info:
            decode_code(b"\xfe\x05AB")
        assert exc_info.value.available == 3

    def test_error_repr(self) -> None:
        """The error repr carries its message."""
        with pytest.raises(TruncatedStreamError) as exc_info:
            decode_code(b"\xff")
        assert repr(exc_info.value).startswith("TruncatedStreamError('Truncated stream")
