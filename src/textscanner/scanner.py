from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol

from .config import ScannerConfig
from .errors import InvalidEncodingError, InvalidInputError, IOFailureError
from .spans import ZERO, Position
from .tokens import Token


logger = logging.getLogger(__name__)

REPLACEMENT_CHAR = "\ufffd"


class Reader(Protocol):
    def read(self, size: int = -1, /) -> bytes | str: ...


class Step(str, Enum):
    """Outcome of a single `Scanner.advance` call.

    Only ADVANCED is truthy, so `while scanner.advance(): ...` stops on both
    exhaustion and malformed input.
    """

    ADVANCED = "advanced"
    EXHAUSTED = "exhausted"
    INVALID = "invalid"

    def __bool__(self) -> bool:
        return self is Step.ADVANCED


def _sequence_width(lead: int) -> int:
    # Lead bytes C0, C1 and F5..FF never start a valid sequence.
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def decode_char(buf: bytes, offset: int) -> tuple[str, int]:
    """Decode the UTF-8 character starting at `offset`.

    Returns `(char, width)`. Malformed or truncated input yields
    `(REPLACEMENT_CHAR, 1)`.
    """
    lead = buf[offset]
    if lead < 0x80:
        return chr(lead), 1
    width = _sequence_width(lead)
    if width == 0:
        return REPLACEMENT_CHAR, 1
    try:
        char = buf[offset : offset + width].decode("utf-8")
    except UnicodeDecodeError:
        return REPLACEMENT_CHAR, 1
    return char, width


def _drain(reader: Reader, chunk_size: int) -> bytes:
    read = getattr(reader, "read", None)
    if not callable(read):
        raise InvalidInputError(f"{type(reader).__name__!r} object has no read() method")
    name = getattr(reader, "name", None)
    source = name if isinstance(name, str) else None

    out = bytearray()
    while True:
        # Closed streams raise ValueError rather than OSError.
        try:
            chunk = read(chunk_size)
        except (OSError, ValueError) as exc:
            raise IOFailureError(message=str(exc) or type(exc).__name__, source=source) from exc
        if not chunk:
            break
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        out += chunk
    return bytes(out)


@dataclass(slots=True)
class Scanner:
    """Cursor over a UTF-8 byte buffer that steps one character at a time.

    A scanner is meant to have a single owner: advance, reset and goto mutate
    the cursor and error list without any locking. Tokens and the buffer are
    immutable and can be shared freely.
    """

    buffer: bytes
    cursor: Position = ZERO
    errors: list[InvalidEncodingError] = field(default_factory=list)
    config: ScannerConfig = field(default_factory=ScannerConfig)

    @classmethod
    def from_reader(cls, reader: Reader | None, *, config: ScannerConfig | None = None) -> "Scanner":
        """Read `reader` to completion and scan its content."""
        if reader is None:
            raise InvalidInputError()
        cfg = config or ScannerConfig()
        buf = _drain(reader, cfg.read_chunk_size)
        logger.debug(f"scanner buffered {len(buf)} bytes from {type(reader).__name__}")
        return cls(buffer=buf, config=cfg)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview, *, config: ScannerConfig | None = None) -> "Scanner":
        return cls(buffer=bytes(data), config=config or ScannerConfig())

    @classmethod
    def from_text(cls, text: str, *, config: ScannerConfig | None = None) -> "Scanner":
        return cls(buffer=text.encode("utf-8"), config=config or ScannerConfig())

    @classmethod
    def from_path(cls, path: str | Path, *, config: ScannerConfig | None = None) -> "Scanner":
        p = Path(path).expanduser()
        try:
            f = p.open("rb")
        except OSError as exc:
            raise IOFailureError(message=exc.strerror or str(exc), source=str(p)) from exc
        with f:
            return cls.from_reader(f, config=config)

    @property
    def consumed(self) -> int:
        return self.cursor.end

    @property
    def remaining(self) -> int:
        return max(len(self.buffer) - self.cursor.end, 0)

    def advance(self) -> Step:
        """Move the cursor over the next character.

        On malformed input an InvalidEncodingError is recorded and the cursor
        stays where it is; calling again records the same error again.
        """
        offset = self.cursor.end
        if offset < 0 or offset >= len(self.buffer):
            return Step.EXHAUSTED
        char, width = decode_char(self.buffer, offset)
        if char == REPLACEMENT_CHAR:
            err = InvalidEncodingError(offset=offset, data=self.buffer[offset : offset + width])
            self.errors.append(err)
            logger.warning(f"scanner stopped: {err}")
            return Step.INVALID
        self.cursor = Position(char=char, start=offset, end=offset + width)
        return Step.ADVANCED

    def scan(self) -> bool:
        return bool(self.advance())

    def token(self) -> Token:
        return Token(position=self.cursor, buffer=self.buffer)

    def peek(self, candidate: str | bytes | bytearray | memoryview) -> bool:
        """Report whether `candidate` immediately follows the cursor.

        Does not move the cursor. The empty candidate matches whenever the
        cursor lies within the buffer.
        """
        needle = candidate.encode("utf-8") if isinstance(candidate, str) else bytes(candidate)
        start = self.cursor.end
        end = start + len(needle)
        if start < 0 or end > len(self.buffer):
            return False
        return self.buffer[start:end] == needle

    def reset(self) -> None:
        self.cursor = ZERO
        self.errors.clear()
        logger.debug("scanner reset")

    def goto(self, target: Token | Position) -> None:
        """Move the cursor to the position of `target`.

        The position is not checked against this scanner's buffer: a token
        taken from another scanner is accepted as is. Callers are responsible
        for passing tokens that belong here.
        """
        if isinstance(target, Position):
            pos = target
        else:
            pos = target.position
            if self.config.strict_goto and target.buffer is not None and target.buffer is not self.buffer:
                logger.warning(f"goto {pos} with a token from a different buffer")
        self.cursor = pos
        logger.debug(f"scanner goto {pos}")

    def scan_all(self) -> tuple[list[Token], bool]:
        """Advance until the input ends or fails to decode.

        Scanning continues from the current cursor. The flag is False when
        errors have been recorded.
        """
        tokens = list(self)
        logger.debug(f"scan_all collected {len(tokens)} tokens, errors={len(self.errors)}")
        return tokens, not self.errored()

    def errored(self) -> bool:
        return len(self.errors) > 0

    def __iter__(self) -> Iterator[Token]:
        while self.advance():
            yield self.token()
