# normalform/horn.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Horn clause recognition and logic-programming rendering

"""Partitions clauses into Horn and non-Horn clauses.

A clause is Horn when it has at most one positive literal. Horn clauses are
written in logic-programming notation:

    goal   (no positive literal)            :- B1, B2.
    fact   (one positive, no negative)      A.
    rule   (one positive, some negative)    A :- B1, B2.

The empty clause is the degenerate goal ``:- .`` and stands for ``false``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple
from parser.ast_nodes import Clause, HornClause, HornKind
from .exceptions import InvalidHornClauseError
from utils.logger import get_logger


@dataclass(frozen=True)
class HornPartition:
    """Result of Horn classification.

    Attributes:
        horn: Horn clauses in logic-programming form, in input order
        non_horn: Remaining clauses, in input order
    """

    horn: Tuple[HornClause, ...]
    non_horn: Tuple[Clause, ...]

    def summary(self) -> str:
        """Render both groups as text, or a notice when there are no clauses."""
        sections = []
        if self.horn:
            sections.append(
                "Horn clauses:\n" + "\n".join(str(clause) for clause in self.horn)
            )
        if self.non_horn:
            sections.append(
                "Non-Horn clauses:\n{ "
                + ", ".join(str(clause) for clause in self.non_horn)
                + " }"
            )
        if not sections:
            return "No clauses found."
        return "\n\n".join(sections)


def format_horn(clause: Clause) -> HornClause:
    """Write a Horn clause as a fact, rule or goal.

    Args:
        clause: Clause with at most one positive literal

    Returns:
        The HornClause with the positive atom as head and the atoms of the
        negative literals as body

    Raises:
        InvalidHornClauseError: The clause has more than one positive literal
    """
    positives = clause.positive_literals
    if len(positives) > 1:
        raise InvalidHornClauseError(
            f"Clause {clause} has {len(positives)} positive literals "
            f"and cannot be written as a Horn clause"
        )

    body = tuple(literal.atom for literal in clause.negative_literals)
    if not positives:
        return HornClause(HornKind.GOAL, None, body)

    head = positives[0].atom
    if not body:
        return HornClause(HornKind.FACT, head)
    return HornClause(HornKind.RULE, head, body)


def classify(clauses: Iterable[Clause]) -> HornPartition:
    """Split ``clauses`` into Horn clauses and non-Horn clauses.

    Every clause lands in exactly one of the two groups; relative order is
    preserved within each.
    """
    logger = get_logger()

    horn = []
    non_horn = []
    for clause in clauses:
        if clause.is_horn():
            horn.append(format_horn(clause))
        else:
            non_horn.append(clause)

    logger.debug(
        f"Horn classification: {len(horn)} Horn, {len(non_horn)} non-Horn clauses"
    )
    return HornPartition(tuple(horn), tuple(non_horn))
