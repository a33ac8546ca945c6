from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from textscanner.cli import main


def _write(tmp_path: Path, data: bytes) -> Path:
    p = tmp_path / "in.txt"
    p.write_bytes(data)
    return p


def test_cli_prints_tokens(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path, "ab柳".encode("utf-8"))
    assert main([str(p)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["{ a 0:1 }", "{ b 1:2 }", "{ 柳 2:5 }"]


def test_cli_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path, b"hi")
    assert main([str(p), "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == [{"char": "h", "start": 0, "end": 1}, {"char": "i", "start": 1, "end": 2}]


def test_cli_peek(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path, b"syntax = 1")
    assert main([str(p), "--peek", "syntax"]) == 0
    assert capsys.readouterr().out.strip() == "true"
    assert main([str(p), "--peek", "package"]) == 0
    assert capsys.readouterr().out.strip() == "false"


def test_cli_invalid_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path, b"a\xffb")
    assert main([str(p)]) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["{ a 0:1 }"]
    assert "error: invalid UTF-8 sequence at byte 1" in captured.err


def test_cli_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "nope.txt")]) == 2
    assert "nope.txt" in capsys.readouterr().err


def test_cli_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"xy")))
    assert main(["-"]) == 0
    assert capsys.readouterr().out.splitlines() == ["{ x 0:1 }", "{ y 1:2 }"]
