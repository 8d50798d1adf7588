"""
  Recursive-descent parser for lamb

- Precedence climbing for binary and assignment operators
- Every binary operator, `=` included, associates to the left
- Emits the immutable nodes of lamb.types.ast:

    - numbers -> Num
    - strings -> Str
    - true/false -> Bool
    - names -> Var
    - a = b -> Assign
    - a + b -> Binary
    - function f(a) body -> Assign(f, Function)
    - function(a) body -> Function
    - if c then t else e -> If
    - { a; b } -> Prog (empty -> Bool(False), single -> the element)
    - (a; b) -> Prog (single -> the element)
    - f(a, b) -> Call
    - zero(a, b) / inc(a, b) -> Zero / Inc
    - loop n body -> Loop
"""

from __future__ import annotations

from typing import Callable, NoReturn, Optional, TypeVar

from lamb.reader.tokenizer import Token, TokenKind, TokenStream
from lamb.types.ast import (
    FALSE, Assign, Binary, Bool, Call, Function, If, Inc, Loop, Node, Num,
    Prog, Str, Var, Zero,
)

T = TypeVar("T")

PRECEDENCE: dict[str, int] = {
    "=": 1,
    "||": 2,
    "&&": 3,
    "<": 7, ">": 7, "<=": 7, ">=": 7, "==": 7, "!=": 7,
    "+": 10, "-": 10,
    "*": 20, "/": 20, "%": 20,
}

# Literal atoms are never call targets, so `loop 3 (body)` reads as a loop
_LITERALS = (Num, Str, Bool)


class Parser:
    def __init__(self, tokens: TokenStream):
        self.tokens = tokens

    def croak(self, message: str) -> NoReturn:
        self.tokens.croak(message)

    # --- Token predicates ---
    def _is(self, kind: TokenKind, value: Optional[str] = None) -> Optional[Token]:
        tok = self.tokens.peek()
        if tok is not None and tok.kind is kind and (value is None or tok.value == value):
            return tok
        return None

    def is_punc(self, ch: Optional[str] = None) -> Optional[Token]:
        return self._is(TokenKind.PUNC, ch)

    def is_kw(self, kw: Optional[str] = None) -> Optional[Token]:
        return self._is(TokenKind.KW, kw)

    def is_op(self, op: Optional[str] = None) -> Optional[Token]:
        return self._is(TokenKind.OP, op)

    def skip_punc(self, ch: str) -> None:
        if not self.is_punc(ch):
            self.croak(f'Expecting punctuation: "{ch}"')
        self.tokens.next()

    def skip_kw(self, kw: str) -> None:
        if not self.is_kw(kw):
            self.croak(f'Expecting keyword: "{kw}"')
        self.tokens.next()

    def unexpected(self) -> NoReturn:
        tok = self.tokens.peek()
        if tok is None:
            self.croak("Unexpected end of input")
        self.croak(f"Unexpected token: {tok.kind.value} {tok.value!r}")

    # --- Combinators ---
    def delimited(self, start: str, stop: str, separator: str, parser: Callable[[], T]) -> list[T]:
        items: list[T] = []
        first = True
        self.skip_punc(start)
        while not self.tokens.eof():
            if self.is_punc(stop):
                break
            if first:
                first = False
            else:
                self.skip_punc(separator)
            if self.is_punc(stop):
                break
            items.append(parser())
        self.skip_punc(stop)
        return items

    def maybe_binary(self, left: Node, my_prec: int) -> Node:
        while True:
            tok = self.is_op()
            if tok is None:
                return left
            his_prec = PRECEDENCE.get(tok.value, 0)
            if his_prec <= my_prec:
                return left
            self.tokens.next()
            right = self.maybe_binary(self.parse_atom(), his_prec)
            if tok.value == "=":
                left = Assign(left, right)
            else:
                left = Binary(tok.value, left, right)

    def maybe_call(self, expr: Node) -> Node:
        if isinstance(expr, _LITERALS):
            return expr
        while self.is_punc("("):
            expr = Call(expr, tuple(self.delimited("(", ")", ",", self.parse_expression)))
        return expr

    # --- Grammar productions ---
    def parse_varname(self) -> str:
        tok = self.tokens.next()
        if tok is None or tok.kind is not TokenKind.VAR:
            self.croak("Expecting variable name")
        return tok.value

    def parse_varlist(self) -> tuple[str, ...]:
        return tuple(self.delimited("(", ")", ",", self.parse_varname))

    def parse_if(self) -> If:
        self.skip_kw("if")
        cond = self.parse_expression()
        if not self.is_punc("{"):
            self.skip_kw("then")
        then = self.parse_expression()
        otherwise = None
        if self.is_kw("else"):
            self.tokens.next()
            otherwise = self.parse_expression()
        return If(cond, then, otherwise)

    def parse_function(self) -> Node:
        # `function(...)` is anonymous; otherwise the next token names the binding
        if self.is_punc("("):
            return self.parse_lambda()
        tok = self.tokens.next()
        if tok is None:
            self.croak("Expecting function name")
        return Assign(_token_node(tok), self.parse_lambda())

    def parse_lambda(self) -> Function:
        params = self.parse_varlist()
        return Function(params, self.parse_expression())

    def parse_loop(self) -> Loop:
        self.skip_kw("loop")
        limit = self.parse_expression()
        return Loop(limit, self.parse_expression())

    def parse_prog(self) -> Node:
        body = self.delimited("{", "}", ";", self.parse_expression)
        if not body:
            return FALSE
        if len(body) == 1:
            return body[0]
        return Prog(tuple(body))

    def _parse_atom(self) -> Node:
        if self.is_punc("("):
            self.tokens.next()
            body = [self.parse_expression()]
            while self.is_punc(";"):
                self.tokens.next()
                body.append(self.parse_expression())
            self.skip_punc(")")
            return body[0] if len(body) == 1 else Prog(tuple(body))
        if self.is_punc("{"):
            return self.parse_prog()
        if self.is_kw("if"):
            return self.parse_if()
        if self.is_kw("true") or self.is_kw("false"):
            return Bool(self.tokens.next().value == "true")
        if self.is_kw("function") or self.is_kw("λ"):
            self.tokens.next()
            return self.parse_function()
        if self.is_kw("zero"):
            self.tokens.next()
            return Zero(self.parse_varlist())
        if self.is_kw("inc"):
            self.tokens.next()
            return Inc(self.parse_varlist())
        if self.is_kw("loop"):
            return self.parse_loop()
        tok = self.tokens.peek()
        if tok is not None and tok.kind in (TokenKind.VAR, TokenKind.NUM, TokenKind.STR):
            return _token_node(self.tokens.next())
        self.unexpected()

    def parse_atom(self) -> Node:
        return self.maybe_call(self._parse_atom())

    def parse_expression(self) -> Node:
        return self.maybe_call(self.maybe_binary(self.parse_atom(), 0))

    def parse_toplevel(self) -> Prog:
        body = []
        while not self.tokens.eof():
            body.append(self.parse_expression())
            if not self.tokens.eof():
                self.skip_punc(";")
        return Prog(tuple(body))


def _token_node(tok: Token) -> Node | Token:
    if tok.kind is TokenKind.VAR:
        return Var(tok.value)
    if tok.kind is TokenKind.NUM:
        return Num(tok.value)
    if tok.kind is TokenKind.STR:
        return Str(tok.value)
    return tok


def parse(text: str) -> Prog:
    """Parse a whole program into a top-level Prog node."""
    return Parser(TokenStream(text)).parse_toplevel()
