from __future__ import annotations

import argparse
import json
import logging
import sys

from .config import ScannerConfig
from .errors import IOFailureError
from .scanner import Scanner


def _open_scanner(path: str | None, config: ScannerConfig) -> Scanner:
    if path is None or path == "-":
        return Scanner.from_reader(sys.stdin.buffer, config=config)
    return Scanner.from_path(path, config=config)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="textscanner", description="Dump the characters of a UTF-8 file with byte offsets")
    ap.add_argument("path", nargs="?", help="Input file (default: stdin)")
    ap.add_argument("--json", action="store_true", help="Print tokens as a JSON array")
    ap.add_argument("--peek", metavar="TEXT", help="Only report whether the input starts with TEXT")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        scanner = _open_scanner(args.path, ScannerConfig.from_env())
    except IOFailureError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.peek is not None:
        print("true" if scanner.peek(args.peek) else "false")
        return 0

    tokens, ok = scanner.scan_all()
    if args.json:
        payload = [{"char": t.char, "start": t.start, "end": t.end} for t in tokens]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for t in tokens:
            print(t)

    for err in scanner.errors:
        print(f"error: {err}", file=sys.stderr)
    return 0 if ok else 1
