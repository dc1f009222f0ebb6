"""
Error types for mylang tokenizing, parsing, and evaluation.

Every failure aborts the current pipeline stage and all later stages.
Only the CLI boundary turns these into user-facing text, using the one
line returned by ``report()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """Distinguishes the failure kinds a pipeline run can end with."""

    INVALID_TOKEN = "invalid_token"
    SYNTAX_ERROR = "syntax_error"
    DIVISION_BY_ZERO = "division_by_zero"
    TYPE_ERROR = "type_error"
    NAME_ERROR = "name_error"
    CALL_ERROR = "call_error"
    CONFIG_ERROR = "config_error"


@dataclass
class ErrorContext:
    """
    Source location of an error.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source line the error occurred on
        source_name: Name of the input ("<expr>", "<stdin>", a file path)
    """

    line: int
    column: int
    snippet: str | None = None
    source_name: str = "<input>"

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "<stdin>:2:5" followed by the snippet
        """
        location = f"{self.source_name}:{self.line}:{self.column}"
        if self.snippet is not None:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the snippet with its line number and an error marker."""
        prefix = f"{self.line:4d} | "
        marker_pos = len(prefix) + self.column - 1
        return f"{prefix}{self.snippet}\n{' ' * marker_pos}^^^"


class MyLangError(Exception):
    """Base exception for all mylang errors."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message

    def report(self) -> str:
        """One distinguishing line describing the failure."""
        return self.message


class InvalidTokenError(MyLangError):
    """
    Raised when characters cannot be classified into a well-formed token.

    Examples:
    - A digit-started token followed by a letter ("1a")
    - An unknown character touching an open token ("ab$")
    """

    kind = ErrorKind.INVALID_TOKEN

    def __init__(self, text: str, context: ErrorContext | None = None):
        self.text = text
        super().__init__(f"Invalid token: {text}", context)


class LangSyntaxError(MyLangError):
    """
    Raised when an expected grammar element is missing.

    Also raised by the driver when tokens remain after a complete
    top-level expression.
    """

    kind = ErrorKind.SYNTAX_ERROR

    def report(self) -> str:
        return "SyntaxError"


class EvaluationError(MyLangError):
    """Base class for failures while evaluating a syntax tree."""


class DivisionByZeroError(EvaluationError):
    """Raised when the right-hand integer of a '/' is zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, message: str = "Division by zero", context: ErrorContext | None = None):
        super().__init__(message, context)

    def report(self) -> str:
        return "DivisionByZero"


class ValueTypeError(EvaluationError):
    """Raised when a value is not of the kind an operation requires."""

    kind = ErrorKind.TYPE_ERROR

    def report(self) -> str:
        return f"TypeError: {self.message}"


class UndefinedNameError(EvaluationError):
    """Raised when an identifier has no storage cell in the environment."""

    kind = ErrorKind.NAME_ERROR

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined name: {name}")


class UnresolvedCallError(EvaluationError):
    """Raised when a call is evaluated; no callable targets exist yet."""

    kind = ErrorKind.CALL_ERROR

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Cannot call {name}(): no such function")


class ConfigError(MyLangError):
    """Raised when a configuration file cannot be read or validated."""

    kind = ErrorKind.CONFIG_ERROR


def make_syntax_error(
    message: str,
    line: int | None = None,
    column: int | None = None,
    snippet: str | None = None,
) -> LangSyntaxError:
    """
    Helper to create a LangSyntaxError with optional context.

    Args:
        message: Error description
        line: Optional line number (1-indexed)
        column: Optional column number (1-indexed)
        snippet: Optional source line

    Returns:
        LangSyntaxError with context if a location was provided
    """
    if line and column:
        return LangSyntaxError(message, ErrorContext(line=line, column=column, snippet=snippet))
    return LangSyntaxError(message)
