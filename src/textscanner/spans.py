from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A decoded character and the half-open byte range [start, end) it occupies.

    Offsets index the raw byte buffer, not the decoded text.
    """

    char: str
    start: int
    end: int

    @property
    def width(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{{ {self.char} {self.start}:{self.end} }}"


# Initial cursor: nothing read yet.
ZERO = Position(char="\0", start=0, end=0)
