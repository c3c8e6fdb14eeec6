"""Tests for smaz decompression and stream inspection."""

from __future__ import annotations

import logging

import pytest

from smaz_codec import (
    CODEBOOK,
    TruncatedStreamError,
    compress,
    decompress,
    get_decompressed_length,
    is_valid_compressed_data,
)


class TestDecompress:
    """Decoding well-formed streams."""

    def test_empty_stream(self) -> None:
        """An empty stream decodes to empty output."""
        assert decompress(b"") == b""

    def test_single_index(self) -> None:
        """Index 1 is 'the'."""
        assert decompress(bytes([1])) == b"the"

    def test_every_index(self) -> None:
        """Each index byte decodes to its own entry."""
        assert decompress(bytes(range(254))) == b"".join(CODEBOOK)

    def test_url(self) -> None:
        """A hand-built URL stream decodes correctly."""
        assert decompress(bytes([67, 59, 6, 6, 59, 87, 253])) == b"http://google.com"

    def test_mixed_codes(self) -> None:
        """Index, run and single codes can be interleaved."""
        stream = bytes([1, 0, 254, 3]) + b"123" + bytes([255, ord("!")])
        assert decompress(stream) == b"the 123!"

    def test_zero_length_run_is_empty(self) -> None:
        """A zero-length run contributes nothing."""
        assert decompress(bytes([254, 0, 1])) == b"the"

    def test_returns_bytes(self) -> None:
        """Output is bytes for any bytes-like input."""
        assert decompress(bytearray([1])) == b"the"
        assert isinstance(decompress(memoryview(bytes([1]))), bytes)


class TestTruncation:
    """Streams that end inside a verbatim code are rejected."""

    def test_run_payload_short(self) -> None:
        """A run claiming 5 bytes but supplying 2 fails."""
        with pytest.raises(TruncatedStreamError):
            decompress(bytes([254, 5, 0x41, 0x42]))

    @pytest.mark.parametrize(
        "stream",
        [
            bytes([254]),
            bytes([255]),
            bytes([1, 254]),
            bytes([1, 255]),
            bytes([1, 254, 2, 0x41]),
        ],
    )
    def test_truncated_streams(self, stream: bytes) -> None:
        """Any missing payload byte is fatal."""
        with pytest.raises(TruncatedStreamError, match="Truncated stream"):
            decompress(stream)

    def test_error_reports_marker_position(self) -> None:
        """The error points at the marker, not the end of input."""
        with pytest.raises(TruncatedStreamError) as exc_info:
            decompress(bytes([1, 0, 254, 9, 0x41]))
        assert exc_info.value.position == 2
        assert exc_info.value.marker == 254

    def test_truncated_compressed_output(self) -> None:
        """Cutting a literal run out of real output is detected."""
        compressed = compress_literal_heavy()
        with pytest.raises(TruncatedStreamError):
            decompress(compressed[:-1])

    def test_failure_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Rejected streams leave a debug record."""
        with caplog.at_level(logging.DEBUG, logger="smaz_codec.decompress"):
            with pytest.raises(TruncatedStreamError):
                decompress(bytes([255]))
        assert "Rejecting stream of 1 bytes" in caplog.text


class TestStreamInspection:
    """Length and validity checks without building output."""

    def test_decompressed_length(self) -> None:
        """Length matches the decoded output."""
        stream = bytes([1, 0, 254, 3]) + b"123" + bytes([255, ord("!")])
        assert get_decompressed_length(stream) == len(b"the 123!")

    def test_decompressed_length_empty(self) -> None:
        """Empty streams decode to zero bytes."""
        assert get_decompressed_length(b"") == 0

    def test_decompressed_length_truncated(self) -> None:
        """Truncated streams raise."""
        with pytest.raises(TruncatedStreamError):
            get_decompressed_length(bytes([254, 5, 0x41, 0x42]))

    def test_is_valid(self) -> None:
        """Complete streams are valid, truncated ones are not."""
        assert is_valid_compressed_data(b"")
        assert is_valid_compressed_data(bytes([1, 255, 0x41]))
        assert not is_valid_compressed_data(bytes([1, 255]))
        assert not is_valid_compressed_data(bytes([254, 5, 0x41, 0x42]))


def compress_literal_heavy() -> bytes:
    """Build a stream that ends in a counted run."""
    compressed = compress(b"the 12345")
    assert compressed[-7:] == bytes([254, 5]) + b"12345"
    return compressed
