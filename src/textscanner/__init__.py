from __future__ import annotations

from .api import ScanReport, scan_bytes, scan_file, scan_text
from .config import ScannerConfig
from .errors import InvalidEncodingError, InvalidInputError, IOFailureError, ScanError
from .scanner import Scanner, Step
from .spans import ZERO, Position
from .tokens import Token, format_tokens

__all__ = [
    "IOFailureError",
    "InvalidEncodingError",
    "InvalidInputError",
    "Position",
    "ScanError",
    "ScanReport",
    "Scanner",
    "ScannerConfig",
    "Step",
    "Token",
    "ZERO",
    "format_tokens",
    "scan_bytes",
    "scan_file",
    "scan_text",
]
