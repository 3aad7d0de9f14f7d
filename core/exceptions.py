# core/exceptions.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Single tagged error surfaced by the conversion pipeline

"""The error type crossing the boundary to the presentation layer.

Whatever stage fails, ``FormulaConverter.convert`` raises exactly one
``ConversionError`` whose ``kind`` tells the caller how to react: syntax and
resource errors are the user's to fix, clausification and Horn errors are
defects. The original stage exception is kept as ``__cause__``.
"""

from typing import Optional
from parser.exceptions import ErrorKind


class ConversionError(RuntimeError):
    """Failure of a conversion request.

    Attributes:
        kind: Stage-specific error tag
        message: Human-readable description
        position: Character offset in the input, for syntax errors
    """

    def __init__(self, kind: ErrorKind, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.position = position

    @classmethod
    def from_exception(cls, exc: Exception) -> "ConversionError":
        """Build the boundary error for a ParseError or NormalFormError."""
        return cls(exc.kind, str(exc), getattr(exc, "position", None))

    @property
    def recoverable(self) -> bool:
        """True for errors the caller can fix by changing the input or limits."""
        return self.kind in (ErrorKind.SYNTAX, ErrorKind.RESOURCE_EXCEEDED)

    def __str__(self) -> str:
        if self.position is None:
            return f"{self.kind}: {self.message}"
        return f"{self.kind} at position {self.position}: {self.message}"
