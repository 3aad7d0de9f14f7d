# parser/exceptions.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Error kinds and exceptions for formula parsing

"""Domain-specific exceptions for formula parsing.

This module defines the error kinds shared by every stage of the conversion
pipeline and the exception raised when an input formula cannot be parsed.
Syntax errors carry the character offset at which parsing failed and a short
description of what the parser would have accepted there, so the presentation
layer can point at the offending part of the input.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Tags identifying the stage that rejected a conversion request."""

    SYNTAX = "SyntaxError"
    CLAUSIFICATION = "ClausificationError"
    INVALID_HORN_CLAUSE = "InvalidHornClauseError"
    RESOURCE_EXCEEDED = "ResourceExceededError"

    def __str__(self) -> str:
        return self.value


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Indicates that the input does not conform to the formula grammar: empty
    input, unbalanced parentheses, unknown symbols, connectives with missing
    operands or quantifiers without a variable or scope.

    Attributes:
        position: Zero-based character offset of the failure, if known
        expected: Description of what would have been accepted, if known
    """

    kind = ErrorKind.SYNTAX

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        expected: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.position = position
        self.expected = expected
