from __future__ import annotations

from dataclasses import dataclass


class ScanError(Exception):
    """Base class for everything the scanner raises or records."""


@dataclass(slots=True)
class InvalidInputError(ScanError):
    message: str = "no input source provided"

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class IOFailureError(ScanError):
    message: str
    source: str | None = None

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


@dataclass(slots=True)
class InvalidEncodingError(ScanError):
    offset: int
    data: bytes

    def __str__(self) -> str:
        return f"invalid UTF-8 sequence at byte {self.offset}: {self.data!r}"
