"""Compression statistics for a single input."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .compress import compress


class StrictBaseModel(BaseModel):
    """A strict, immutable pydantic base model."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
    )


class CompressionReport(StrictBaseModel):
    """
    Size comparison between an input and its smaz encoding.

    Short strings outside the codebook's vocabulary can grow when encoded,
    so the report states the direction as well as the amount.
    """

    original_size: int = Field(ge=0)
    """Length of the uncompressed input in bytes."""

    compressed_size: int = Field(ge=0)
    """Length of the code stream in bytes."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ratio(self) -> float:
        """Compressed size divided by original size (0.0 for empty input)."""
        if self.original_size == 0:
            return 0.0
        return self.compressed_size / self.original_size

    @computed_field  # type: ignore[prop-decorator]
    @property
    def savings_percent(self) -> int:
        """
        Whole-percent size reduction; negative when the output grew.

        Computed as 100 - (100 * compressed) // original, matching the
        classic smaz test output.
        """
        if self.original_size == 0:
            return 0
        return 100 - (100 * self.compressed_size) // self.original_size

    @computed_field  # type: ignore[prop-decorator]
    @property
    def verdict(self) -> Literal["compressed", "enlarged", "unchanged"]:
        """Whether encoding shrank, grew, or kept the size."""
        if self.compressed_size < self.original_size:
            return "compressed"
        if self.compressed_size > self.original_size:
            return "enlarged"
        return "unchanged"

    @classmethod
    def measure(cls, data: bytes | bytearray | memoryview) -> CompressionReport:
        """Compress `data` and report the sizes."""
        return cls(original_size=len(data), compressed_size=len(compress(data)))

    def describe(self) -> str:
        """One-line summary, e.g. "compressed by 36%"."""
        return f"{self.verdict} by {abs(self.savings_percent)}%"
