from __future__ import annotations

import pytest

from textscanner import ZERO, Position, Token, format_tokens


@pytest.mark.parametrize(
    ("char", "start", "end"),
    [
        ("\0", 0, 1),
        ("a", 23, 24),
        ("禪", 2, 5),
        ("9", 37, 38),
        ("\uffff", 0, 3),
    ],
)
def test_token_string(char: str, start: int, end: int) -> None:
    token = Token(Position(char=char, start=start, end=end))
    assert str(token) == f"{{ {char} {start}:{end} }}"
    assert str(token) == str(token.position)


def test_zero_position() -> None:
    assert ZERO == Position(char="\0", start=0, end=0)
    assert ZERO.width == 0
    assert str(ZERO) == "{ \0 0:0 }"


def test_token_raw_slices_buffer() -> None:
    buf = "a禪b".encode("utf-8")
    t = Token(Position(char="禪", start=1, end=4), buf)
    assert t.raw == "禪".encode("utf-8")
    assert t.raw.decode("utf-8") == t.char
    assert (t.start, t.end, t.width) == (1, 4, 3)


def test_token_without_buffer() -> None:
    assert Token(Position(char="x", start=0, end=1)).raw == b""


def test_token_equality_ignores_buffer() -> None:
    pos = Position(char="x", start=0, end=1)
    assert Token(pos, b"x") == Token(pos, b"xyz")
    assert Token(pos) != Token(Position(char="x", start=1, end=2))
    assert "buffer" not in repr(Token(pos, b"x"))


def test_token_is_frozen() -> None:
    t = Token(Position(char="x", start=0, end=1))
    with pytest.raises(AttributeError):
        t.position = ZERO  # type: ignore[misc]


def test_format_tokens() -> None:
    tokens = [Token(Position(c, i, i + 1)) for i, c in enumerate("Hi!")]
    assert format_tokens(tokens) == "[{ H 0:1 } { i 1:2 } { ! 2:3 }]"
    assert format_tokens([]) == "[]"
