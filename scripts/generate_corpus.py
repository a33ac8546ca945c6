from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from textscanner import scan_file
from textscanner.testing import generate_corpus_files


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus", description="Write a UTF-8 text corpus and report character widths")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=1000)
    ap.add_argument("--out", default="tests/fixtures/generated_corpus")
    args = ap.parse_args(argv)

    out_dir = Path(args.out).resolve() / f"seed_{args.seed}_count_{args.count}"
    out_dir.mkdir(parents=True, exist_ok=True)

    widths: Counter[int] = Counter()
    total_bytes = 0
    for rel, text in generate_corpus_files(seed=args.seed, count=args.count):
        p = out_dir / rel
        p.write_bytes(text.encode("utf-8"))
        # Scan back what was written so the stats reflect the files on disk.
        report = scan_file(p)
        if not report.ok:
            raise SystemExit(f"{p}: {report.errors[0]}")
        widths.update(t.width for t in report.tokens)
        total_bytes += report.size

    print(str(out_dir))
    print(f"files: {args.count}  bytes: {total_bytes}  chars: {sum(widths.values())}")
    for w in sorted(widths):
        print(f"  {w}-byte: {widths[w]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
