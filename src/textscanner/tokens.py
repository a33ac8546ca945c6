from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .spans import Position


@dataclass(frozen=True, slots=True)
class Token:
    position: Position
    # Shared with the scanner that produced the token, never copied.
    buffer: bytes | None = field(default=None, repr=False, compare=False)

    @property
    def char(self) -> str:
        return self.position.char

    @property
    def start(self) -> int:
        return self.position.start

    @property
    def end(self) -> int:
        return self.position.end

    @property
    def width(self) -> int:
        return self.position.width

    @property
    def raw(self) -> bytes:
        """Bytes of the character as they appear in the buffer."""
        if self.buffer is None:
            return b""
        return self.buffer[self.start : self.end]

    def __str__(self) -> str:
        return str(self.position)


def format_tokens(tokens: Iterable[Token]) -> str:
    return "[" + " ".join(str(t) for t in tokens) + "]"
