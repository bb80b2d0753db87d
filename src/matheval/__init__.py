"""
matheval - arithmetic expression evaluation with named variables.

Tokenizer and collapse-based evaluator for decimal numbers, + - * /,
parentheses, and identifiers resolved from a caller-supplied mapping.

Usage:
    from matheval import calculate

    result = calculate("89 * (a / 13 + 6) + b", {"a": 52, "b": 18})
    # result == 908.0
"""

from matheval._version import get_version
from matheval.errors import (
    ConfigError,
    LexError,
    MathEvalError,
    NumberFormatError,
    ParseError,
    UndefinedVariableError,
)
from matheval.evaluator import calculate, evaluate
from matheval.tokenizer import Token, TokenKind, tokenize

__version__ = get_version()

__all__ = [
    "__version__",
    "calculate",
    "evaluate",
    "tokenize",
    "Token",
    "TokenKind",
    "MathEvalError",
    "LexError",
    "UndefinedVariableError",
    "ParseError",
    "NumberFormatError",
    "ConfigError",
]
