"""
Expression evaluator for arithmetic token sequences.

Evaluates by repeated single-step collapse instead of building a parse tree:

1. Substitute identifiers with their values from the variable mapping.
2. Shortcut a lone signed number ("-", number).
3. Collapse each parenthesized slice by evaluating it recursively.
4. Reduce "*" and "/" left to right.
5. Reduce "+" and "-" left to right.

Every step builds a fresh working list; input tokens are never modified.
Does NOT use Python's eval().
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from matheval.errors import NumberFormatError, ParseError, UndefinedVariableError
from matheval.numeric import apply_operator, format_single, parse_single, to_single
from matheval.tokenizer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

MULTIPLICATIVE = ("*", "/")
ADDITIVE = ("+", "-")


def calculate(expression: str, variables: Mapping[str, float] | None = None) -> float:
    """Tokenize and evaluate an expression string.

    Args:
        expression: Expression text (e.g., "89 * (a / 13 + 6) + b").
        variables: Identifier name -> value. Absent means no variables.

    Returns:
        The single-precision result as a Python float.

    Raises:
        LexError: If the expression contains a malformed number.
        UndefinedVariableError: If an identifier is missing from *variables*.
        ParseError: If the token sequence is structurally invalid.
    """
    return evaluate(tokenize(expression), variables)


def evaluate(tokens: Iterable[Token], variables: Mapping[str, float] | None = None) -> float:
    """Evaluate a token sequence against a variable mapping.

    Args:
        tokens: Tokens from :func:`~matheval.tokenizer.tokenize`.
        variables: Identifier name -> value. Absent means no variables.

    Returns:
        The single-precision result as a Python float.

    Raises:
        ParseError: If parentheses nest deeper than the interpreter stack allows.
    """
    working = substitute(tokens, variables or {})
    try:
        return _reduce(working)
    except RecursionError as e:
        raise ParseError("Parentheses nested too deeply") from e


def substitute(tokens: Iterable[Token], variables: Mapping[str, float]) -> list[Token]:
    """Replace every identifier with a number token holding its value.

    Non-identifier tokens pass through unchanged.

    Raises:
        UndefinedVariableError: If an identifier has no entry in *variables*.
        NumberFormatError: If a variable value is not a number.
    """
    result: list[Token] = []
    for token in tokens:
        if token.kind == TokenKind.IDENTIFIER:
            if token.text not in variables:
                raise UndefinedVariableError(token.text, token.pos)
            raw = variables[token.text]
            try:
                value = to_single(raw)
            except (TypeError, ValueError) as e:
                raise NumberFormatError(str(raw), token.pos) from e
            token = Token(kind=TokenKind.NUMBER, text=format_single(value), pos=token.pos)
        result.append(token)
    return result


def _reduce(tokens: list[Token]) -> float:
    """Collapse an identifier-free token list to a single value."""
    # Lone signed number; not a general prefix operator
    if len(tokens) == 2 and tokens[0].is_operator("-") and tokens[1].kind == TokenKind.NUMBER:
        return -parse_single(tokens[1].text, tokens[1].pos)

    tokens = _resolve_parentheses(tokens)
    tokens = _reduce_pass(tokens, MULTIPLICATIVE)
    tokens = _reduce_pass(tokens, ADDITIVE)

    if len(tokens) != 1:
        if not tokens:
            raise ParseError("Empty expression")
        raise ParseError(
            f"Expression does not reduce to a single value (left: {_render(tokens)})",
            tokens[1].pos,
        )
    return parse_single(tokens[0].text, tokens[0].pos)


def find_closing(tokens: list[Token], open_index: int) -> int:
    """Return the index of the ")" matching the "(" at *open_index*.

    Raises:
        ParseError: If the sequence ends before the parenthesis is closed.
    """
    depth = 1
    for index in range(open_index + 1, len(tokens)):
        if tokens[index].is_operator("("):
            depth += 1
        elif tokens[index].is_operator(")"):
            depth -= 1
            if depth == 0:
                return index
    raise ParseError("Mismatched parentheses: '(' is never closed", tokens[open_index].pos)


def _resolve_parentheses(tokens: list[Token]) -> list[Token]:
    """Replace each parenthesized slice with its evaluated value."""
    while True:
        open_index = next((i for i, t in enumerate(tokens) if t.is_operator("(")), None)
        if open_index is None:
            break
        close_index = find_closing(tokens, open_index)

        inner = tokens[open_index + 1 : close_index]
        value = _reduce(inner)
        result = Token(kind=TokenKind.NUMBER, text=format_single(value), pos=tokens[open_index].pos)
        logger.debug("Collapsed (%s) -> %s", _render(inner), result.text)

        tokens = tokens[:open_index] + [result] + tokens[close_index + 1 :]

    for token in tokens:
        if token.is_operator(")"):
            raise ParseError("Mismatched parentheses: unexpected ')'", token.pos)
    return tokens


def _reduce_pass(tokens: list[Token], operators: tuple[str, ...]) -> list[Token]:
    """Collapse the left-most of *operators* with its neighbors until none remain."""
    while True:
        index = next((i for i, t in enumerate(tokens) if t.is_operator(*operators)), None)
        if index is None:
            return tokens

        op = tokens[index]
        if index == 0 or index == len(tokens) - 1:
            raise ParseError(f"Operator {op.text!r} is missing an operand", op.pos)
        left, right = tokens[index - 1], tokens[index + 1]
        for neighbor in (left, right):
            if neighbor.kind != TokenKind.NUMBER:
                raise ParseError(
                    f"Operator {op.text!r} expects a number, got {neighbor.text!r}",
                    neighbor.pos,
                )

        value = apply_operator(
            op.text,
            parse_single(left.text, left.pos),
            parse_single(right.text, right.pos),
        )
        result = Token(kind=TokenKind.NUMBER, text=format_single(value), pos=left.pos)
        logger.debug("Collapsed %s %s %s -> %s", left.text, op.text, right.text, result.text)

        tokens = tokens[: index - 1] + [result] + tokens[index + 2 :]


def _render(tokens: list[Token]) -> str:
    return " ".join(t.text for t in tokens)
