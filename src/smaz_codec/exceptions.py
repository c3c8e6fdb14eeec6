"""Exception hierarchy for the smaz codec."""

from __future__ import annotations


class SmazError(Exception):
    """
    Base exception for all smaz-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class TruncatedStreamError(SmazError):
    """
    Raised when a code stream ends before a marker's payload is complete.

    This is the only way decoding can fail.

    Attributes:
        position: Offset of the marker byte whose payload is missing.
        marker: The marker value (254 for a run, 255 for a single byte).
        needed: Number of bytes the marker requires after itself.
        available: Number of bytes actually present after the marker.
    """

    def __init__(
        self,
        position: int,
        marker: int,
        *,
        needed: int,
        available: int,
    ) -> None:
        self.position = position
        self.marker = marker
        self.needed = needed
        self.available = available

        super().__init__(
            f"Truncated stream at position {position}: marker {marker} "
            f"needs {needed} more bytes but only {available} available"
        )


class CodebookError(SmazError):
    """
    Raised when a codebook violates the table invariants.

    Attributes:
        index: Position of the offending entry (if a single entry is at fault).
        detail: Description of what went wrong.
    """

    def __init__(self, detail: str, *, index: int | None = None) -> None:
        self.index = index
        self.detail = detail

        msg = f"Invalid codebook: {detail}"
        if index is not None:
            msg = f"{msg} (entry {index})"

        super().__init__(msg)
