"""
Tokenizer for arithmetic expressions.

Converts an expression string into a lazy sequence of typed tokens.
Single pass, character by character, with one pending buffer for the
number or identifier being accumulated.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterator
from enum import StrEnum, auto

from pydantic import BaseModel, ConfigDict, Field

from matheval.errors import LexError


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    NUMBER = auto()
    IDENTIFIER = auto()
    # Covers + - * / and both parentheses
    OPERATOR = auto()


class Token(BaseModel):
    """A single token from the expression tokenizer."""

    kind: TokenKind = Field(description="Token type")
    text: str = Field(description="Literal lexeme")
    pos: int = Field(default=0, description="Offset of the first character in the source")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"[{self.kind.upper()}] {self.text}"

    def is_operator(self, *symbols: str) -> bool:
        """True if this is an operator token, optionally one of *symbols*."""
        if self.kind != TokenKind.OPERATOR:
            return False
        return not symbols or self.text in symbols


OPERATORS = frozenset("+-*/()")


class _Buffer:
    """Pending number or identifier text."""

    __slots__ = ("kind", "text", "start", "end")

    def __init__(self) -> None:
        self.kind: TokenKind | None = None
        self.text = ""
        self.start = 0
        self.end = 0

    def append(self, kind: TokenKind, c: str, pos: int) -> None:
        if not self.text:
            self.start = pos
        self.kind = kind
        self.text += c
        self.end = pos

    def flush(self) -> Token:
        """Finalize the buffer into a token and reset it."""
        if self.kind == TokenKind.NUMBER and self.text.endswith("."):
            raise LexError(f"Number ends with a decimal point: {self.text!r}", self.end)
        token = Token(kind=self.kind, text=self.text, pos=self.start)
        self.kind = None
        self.text = ""
        return token


def _is_ignored(c: str) -> bool:
    return c.isspace() or unicodedata.category(c) == "Cc"


def tokenize(source: str) -> Iterator[Token]:
    """Tokenize an expression string.

    Tokens are produced lazily; lexical errors surface while iterating.
    Whitespace is skipped without ending the pending token, so ``"12 34"``
    yields the single number ``1234``.
    Characters outside the expression alphabet (``%``, ``_``, ``^``) raise
    LexError instead of being skipped.

    Raises:
        LexError: On a malformed number or an unexpected character.
    """
    buffer = _Buffer()

    for i, c in enumerate(source):
        if _is_ignored(c):
            continue

        if c in OPERATORS:
            if buffer.text:
                yield buffer.flush()
            yield Token(kind=TokenKind.OPERATOR, text=c, pos=i)
            continue

        if c == ".":
            if buffer.kind != TokenKind.NUMBER:
                raise LexError("Decimal point outside a number", i)
            if "." in buffer.text:
                raise LexError(f"Second decimal point in number {buffer.text!r}", i)
            buffer.append(TokenKind.NUMBER, c, i)
            continue

        if c.isdecimal():
            # Type change forces a flush
            if buffer.kind == TokenKind.IDENTIFIER and buffer.text:
                yield buffer.flush()
            buffer.append(TokenKind.NUMBER, c, i)
            continue

        if c.isalpha():
            if buffer.kind == TokenKind.NUMBER and buffer.text:
                yield buffer.flush()
            buffer.append(TokenKind.IDENTIFIER, c, i)
            continue

        raise LexError(f"Unexpected character: {c!r}", i)

    if buffer.text:
        yield buffer.flush()
