# normalform/exceptions.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Exceptions raised by the normalization stages

"""Exceptions raised while rewriting formulas into normal forms.

``ClausificationError`` and ``InvalidHornClauseError`` signal broken
invariants between stages (a defect, not a user error) and carry the offending
formula or clause in their message. ``ResourceExceededError`` is recoverable:
it reports that a conversion outgrew its node or time budget.
"""

from typing import Optional
from parser.exceptions import ErrorKind


class NormalFormError(RuntimeError):
    """Base class for failures inside the normalization pipeline."""

    kind: ErrorKind = ErrorKind.CLAUSIFICATION
    position: Optional[int] = None


class ClausificationError(NormalFormError):
    """Raised when a formula reaching the clausal stages breaks their invariants.

    Typical causes are quantifiers left in a prenex matrix or a CNF conjunct
    that is not a disjunction of literals.
    """

    kind = ErrorKind.CLAUSIFICATION


class InvalidHornClauseError(NormalFormError):
    """Raised when a clause with several positive literals is formatted as Horn."""

    kind = ErrorKind.INVALID_HORN_CLAUSE


class ResourceExceededError(NormalFormError):
    """Raised when a conversion exceeds its node-count or wall-clock budget.

    Attributes:
        limit: The configured limit that was exceeded
        observed: The measured value at the time of the check
    """

    kind = ErrorKind.RESOURCE_EXCEEDED

    def __init__(self, message: str, limit: Optional[float] = None, observed: Optional[float] = None):
        super().__init__(message)
        self.limit = limit
        self.observed = observed
