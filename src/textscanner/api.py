from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import ScannerConfig
from .errors import InvalidEncodingError
from .scanner import Scanner
from .tokens import Token


@dataclass(frozen=True, slots=True)
class ScanReport:
    tokens: tuple[Token, ...]
    ok: bool
    errors: tuple[InvalidEncodingError, ...]
    size: int  # buffer length in bytes


def _report(scanner: Scanner) -> ScanReport:
    tokens, ok = scanner.scan_all()
    return ScanReport(
        tokens=tuple(tokens),
        ok=ok,
        errors=tuple(scanner.errors),
        size=len(scanner.buffer),
    )


def scan_bytes(data: bytes | bytearray | memoryview, *, config: ScannerConfig | None = None) -> ScanReport:
    return _report(Scanner.from_bytes(data, config=config))


def scan_text(text: str, *, config: ScannerConfig | None = None) -> ScanReport:
    return _report(Scanner.from_text(text, config=config))


def scan_file(path: str | Path, *, config: ScannerConfig | None = None) -> ScanReport:
    """Scan a whole file; raises IOFailureError when it cannot be read."""
    return _report(Scanner.from_path(path, config=config))
