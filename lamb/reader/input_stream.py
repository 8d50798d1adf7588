"""Character cursor over raw program text.

Tracks line and column so that every reader failure carries a position.
Lines start at 1, columns count characters consumed on the current line.
"""

from __future__ import annotations

from typing import NoReturn

from lamb.errors import LambSyntaxError


class InputStream:
    __slots__ = ("text", "pos", "line", "col")

    def __init__(self, text: str):
        self.text: str = text
        self.pos: int = 0
        self.line: int = 1
        self.col: int = 0

    def next(self) -> str:
        """Consume and return one character ('' at end of input)."""
        ch = self.peek()
        if not ch:
            return ch
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.col = 0
        else:
            self.col += 1
        return ch

    def peek(self) -> str:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ""

    def eof(self) -> bool:
        return self.peek() == ""

    def croak(self, message: str) -> NoReturn:
        raise LambSyntaxError(message, self.line, self.col)
