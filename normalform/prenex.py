# normalform/prenex.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Quantifier extraction into prenex form

"""Moves every quantifier of a formula into a single prefix.

The input must be alpha-renamed negation normal form. Bound names are then
unique and never free elsewhere, and NNF has fixed the kind of every
quantifier, so quantifiers can be lifted out of ``∧`` and ``∨`` unchanged in a
single left-to-right, outside-in traversal.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple
from parser import ast_nodes as ast
from parser.ast_nodes import Notation
from .exceptions import ClausificationError
from utils.logger import get_logger


class Quantifier(Enum):
    """Kind of a prefix quantifier."""

    FORALL = "forall"
    EXISTS = "exists"

    def dual(self) -> Quantifier:
        return Quantifier.EXISTS if self is Quantifier.FORALL else Quantifier.FORALL


@dataclass(frozen=True)
class QuantifierBinding:
    """One entry of a quantifier prefix.

    Attributes:
        kind: Universal or existential
        variable: Bound variable name
    """

    kind: Quantifier
    variable: str

    def wrap(self, body: ast.Formula) -> ast.Formula:
        """Return ``body`` quantified by this binding."""
        if self.kind is Quantifier.FORALL:
            return ast.ForAll(self.variable, body)
        return ast.Exists(self.variable, body)

    def dual(self) -> QuantifierBinding:
        return QuantifierBinding(self.kind.dual(), self.variable)

    def __str__(self) -> str:
        symbol = "∀" if self.kind is Quantifier.FORALL else "∃"
        return f"{symbol}{self.variable}"


@dataclass(frozen=True)
class Prenex:
    """Formula split into a quantifier prefix and a quantifier-free matrix.

    Attributes:
        prefix: Quantifier bindings, outermost first
        matrix: Quantifier-free remainder of the formula
    """

    prefix: Tuple[QuantifierBinding, ...]
    matrix: ast.Formula

    def to_formula(self) -> ast.Formula:
        """Rebuild the quantified formula, innermost binding first."""
        result = self.matrix
        for binding in reversed(self.prefix):
            result = binding.wrap(result)
        return result

    def with_matrix(self, matrix: ast.Formula) -> Prenex:
        return Prenex(self.prefix, matrix)

    def render(self, notation: Notation = Notation.UNICODE) -> str:
        return self.to_formula().render(notation)

    def __str__(self) -> str:
        return self.render()


class PrenexTransformer(ast.Visitor):
    """Extracts the quantifiers of an alpha-renamed NNF formula.

    Each visit returns ``(prefix, matrix)`` for the visited subtree.
    """

    def transform(self, root: ast.Formula) -> Prenex:
        """Return the prenex form of ``root``.

        Raises:
            ClausificationError: The input still contains → or ↔
        """
        logger = get_logger()
        logger.debug(f"Starting prenex transformation of {type(root).__name__}")

        prefix, matrix = root.accept(self)
        result = Prenex(tuple(prefix), matrix)

        logger.debug(
            f"Prenex transformation complete: {len(result.prefix)} quantifiers, "
            f"matrix {result.matrix}"
        )
        return result

    def visit_atom(self, n: ast.Atom) -> Tuple[List[QuantifierBinding], ast.Formula]:
        return [], n

    def visit_not(self, n: ast.Not) -> Tuple[List[QuantifierBinding], ast.Formula]:
        if isinstance(n.operand, ast.Atom):
            return [], n

        # Outside NNF: ¬Qx A is Q'x ¬A
        prefix, matrix = n.operand.accept(self)
        return [binding.dual() for binding in prefix], ast.Not(matrix)

    def visit_and(self, n: ast.And) -> Tuple[List[QuantifierBinding], ast.Formula]:
        left_prefix, left = n.left.accept(self)
        right_prefix, right = n.right.accept(self)
        return left_prefix + right_prefix, ast.And(left, right)

    def visit_or(self, n: ast.Or) -> Tuple[List[QuantifierBinding], ast.Formula]:
        left_prefix, left = n.left.accept(self)
        right_prefix, right = n.right.accept(self)
        return left_prefix + right_prefix, ast.Or(left, right)

    def visit_implies(self, n: ast.Implies):
        raise ClausificationError(
            f"Prenex transformation requires eliminated implications, found: {n}"
        )

    def visit_iff(self, n: ast.Iff):
        raise ClausificationError(
            f"Prenex transformation requires eliminated biconditionals, found: {n}"
        )

    def visit_forall(self, n: ast.ForAll) -> Tuple[List[QuantifierBinding], ast.Formula]:
        prefix, matrix = n.body.accept(self)
        return [QuantifierBinding(Quantifier.FORALL, n.variable)] + prefix, matrix

    def visit_exists(self, n: ast.Exists) -> Tuple[List[QuantifierBinding], ast.Formula]:
        prefix, matrix = n.body.accept(self)
        return [QuantifierBinding(Quantifier.EXISTS, n.variable)] + prefix, matrix


def to_prenex(formula: ast.Formula) -> Prenex:
    """Return the prenex form of an alpha-renamed NNF formula."""
    return PrenexTransformer().transform(formula)
