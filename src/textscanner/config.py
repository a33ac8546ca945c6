from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass


DEFAULT_READ_CHUNK_SIZE = 64 * 1024
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class ScannerConfig:
    """Tunables shared by every way of building a scanner.

    `strict_goto` only adds a warning when a token from another buffer is
    passed to `Scanner.goto`; the cursor moves either way.
    """

    read_chunk_size: int = DEFAULT_READ_CHUNK_SIZE
    strict_goto: bool = False

    def __post_init__(self) -> None:
        if self.read_chunk_size <= 0:
            raise ValueError(f"read_chunk_size must be positive, got {self.read_chunk_size}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ScannerConfig":
        env = os.environ if environ is None else environ
        chunk = env.get("TEXTSCANNER_READ_CHUNK_SIZE")
        strict = env.get("TEXTSCANNER_STRICT_GOTO", "")
        return cls(
            read_chunk_size=int(chunk) if chunk else DEFAULT_READ_CHUNK_SIZE,
            strict_goto=strict.strip().lower() in _TRUTHY,
        )
