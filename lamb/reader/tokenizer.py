"""Tokenizer for lamb source text.

Produces typed tokens from an InputStream with one token of lookahead.
Keywords are identifiers that match the fixed KEYWORDS set exactly.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Iterator, NoReturn, Optional

from lamb.reader.input_stream import InputStream


class TokenKind(enum.Enum):
    NUM = "num"
    STR = "str"
    VAR = "var"
    KW = "kw"
    PUNC = "punc"
    OP = "op"


@dataclass(frozen=True)
class Position:
    line: int
    col: int

    def __str__(self) -> str:
        return f"{self.line}:{self.col}"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str | float
    position: Position | None = field(default=None, compare=False)


KEYWORDS = frozenset(
    ("if", "then", "else", "function", "λ", "true", "false", "zero", "inc", "loop")
)
PUNCTUATION = ",;(){}[]"
OPERATOR_CHARS = "+-*/%=&|<>!"
WHITESPACE = " \t\n"
DIGITS = "0123456789"
_ID_START = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZλ_"
_ID_EXTRA = "?!-<>=" + DIGITS


def is_id_start(ch: str) -> bool:
    return ch != "" and ch in _ID_START


def is_id(ch: str) -> bool:
    return is_id_start(ch) or (ch != "" and ch in _ID_EXTRA)


class TokenStream:
    """One-token lookahead over the tokens of an InputStream."""

    def __init__(self, source: InputStream | str):
        self.input: InputStream = (
            source if isinstance(source, InputStream) else InputStream(source)
        )
        self.current: Optional[Token] = None

    def croak(self, message: str) -> NoReturn:
        self.input.croak(message)

    # --- Character helpers ---
    def _read_while(self, predicate: Callable[[str], bool]) -> str:
        chars = []
        while not self.input.eof() and predicate(self.input.peek()):
            chars.append(self.input.next())
        return "".join(chars)

    def _position(self) -> Position:
        return Position(self.input.line, self.input.col)

    # --- Token readers ---
    def _read_number(self, start: Position) -> Token:
        has_dot = False

        def accept(ch: str) -> bool:
            nonlocal has_dot
            if ch == ".":
                if has_dot:
                    return False
                has_dot = True
                return True
            return ch in DIGITS

        text = self._read_while(accept)
        return Token(TokenKind.NUM, float(text), start)

    def _read_ident(self, start: Position) -> Token:
        name = self._read_while(is_id)
        kind = TokenKind.KW if name in KEYWORDS else TokenKind.VAR
        return Token(kind, name, start)

    def _read_escaped(self, end: str) -> str:
        # Unterminated strings run silently to the end of input
        escaped = False
        chars = []
        self.input.next()
        while not self.input.eof():
            ch = self.input.next()
            if escaped:
                chars.append(ch)
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == end:
                break
            else:
                chars.append(ch)
        return "".join(chars)

    def _skip_comment(self) -> None:
        self._read_while(lambda ch: ch != "\n")
        self.input.next()

    def read_next(self) -> Optional[Token]:
        while True:
            self._read_while(lambda ch: ch in WHITESPACE)
            if self.input.eof():
                return None
            ch = self.input.peek()
            if ch != "#":
                break
            self._skip_comment()

        start = self._position()
        if ch == '"':
            return Token(TokenKind.STR, self._read_escaped('"'), start)
        if ch in DIGITS:
            return self._read_number(start)
        if is_id_start(ch):
            return self._read_ident(start)
        if ch in PUNCTUATION:
            return Token(TokenKind.PUNC, self.input.next(), start)
        if ch in OPERATOR_CHARS:
            return Token(TokenKind.OP, self._read_while(lambda c: c in OPERATOR_CHARS), start)
        self.croak(f"Can't handle character: {ch}")

    # --- Lookahead interface ---
    def peek(self) -> Optional[Token]:
        if self.current is None:
            self.current = self.read_next()
        return self.current

    def next(self) -> Optional[Token]:
        tok = self.current
        self.current = None
        return tok if tok is not None else self.read_next()

    def eof(self) -> bool:
        return self.peek() is None

    def __iter__(self) -> Iterator[Token]:
        while (tok := self.next()) is not None:
            yield tok


def tokenize(text: str) -> list[Token]:
    """Tokenize the whole of `text` eagerly."""
    return list(TokenStream(text))
