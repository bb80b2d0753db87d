"""
Error types for expression tokenizing, evaluation, and configuration.
"""

from dataclasses import dataclass


class MathEvalError(Exception):
    """Base exception for all matheval errors."""

    def __init__(self, message: str, pos: int | None = None):
        self.message = message
        self.pos = pos
        super().__init__(message)

    def format_with_source(self, expression: str) -> str:
        """Format the message followed by the expression with a position marker."""
        if self.pos is None:
            return self.message
        context = ErrorContext(expression=expression, pos=self.pos)
        return f"{self.message}\n{context.format()}"


class LexError(MathEvalError):
    """
    Raised when a numeric literal is malformed.

    Examples:
    - Decimal point with no preceding digit (".5")
    - Second decimal point in one number ("1.2.3")
    - Number ending in a decimal point ("5.")
    - Character outside the expression alphabet ("5 % 2")
    """

    pass


class UndefinedVariableError(MathEvalError):
    """Raised when an identifier has no entry in the variable mapping."""

    def __init__(self, name: str, pos: int | None = None):
        self.name = name
        super().__init__(f"Undefined variable: {name!r}", pos)


class ParseError(MathEvalError):
    """
    Raised when a token sequence is structurally invalid.

    Examples:
    - Operator at the start or end of a sequence
    - Two operators in a row
    - Unbalanced parentheses
    - Sequence that does not reduce to a single number
    """

    pass


class NumberFormatError(MathEvalError):
    """Raised when a number token's text cannot be parsed as a decimal."""

    def __init__(self, text: str, pos: int | None = None):
        self.text = text
        super().__init__(f"Invalid number: {text!r}", pos)


class ConfigError(MathEvalError):
    """Raised when a configuration file or variable assignment is invalid."""

    pass


@dataclass
class ErrorContext:
    """
    Location of an error inside an expression.

    Attributes:
        expression: The source expression text
        pos: 0-based character offset of the error
    """

    expression: str
    pos: int

    def format(self) -> str:
        """
        Format the expression with a marker under the error position.

        Returns:
            Two lines like:
                "  1 + * 2"
                "      ^"
        """
        prefix = "  "
        # Tabs and newlines would break marker alignment
        line = "".join(" " if c.isspace() else c for c in self.expression)
        marker_pos = len(prefix) + min(self.pos, len(line))
        return f"{prefix}{line}\n{' ' * marker_pos}^"
