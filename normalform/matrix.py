# normalform/matrix.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Conjunctive and disjunctive normal form of quantifier-free matrices

"""Distributes ∧ and ∨ over a quantifier-free NNF matrix.

CNF rewrite rules (DNF uses the dual rules with ∧ and ∨ swapped):

    A ∨ (B ∧ C)  ⟶  (A ∨ B) ∧ (A ∨ C)
    (B ∧ C) ∨ A  ⟶  (B ∨ A) ∧ (C ∨ A)

Each pass rebuilds the tree bottom-up and applies at most one rule per node.
Passes repeat until one applies no rule. The result can be exponentially
larger than the input; the optional resource budget is checked after every
pass.
"""

from __future__ import annotations
from typing import List, Optional, Type
from parser import ast_nodes as ast
from .budget import ResourceBudget
from .exceptions import ClausificationError
from utils.logger import get_logger


class _Distributor(ast.Visitor):
    """Single bottom-up pass distributing ``inner`` over ``outer``.

    For CNF ``outer`` is And and ``inner`` is Or; DNF swaps them. Quantified
    subformulas are treated as opaque leaves.

    Attributes:
        changed: Whether the last pass applied any rule
    """

    def __init__(self, outer: Type[ast.BinaryFormula], inner: Type[ast.BinaryFormula]):
        self._outer = outer
        self._inner = inner
        self.changed = False

    def run(self, node: ast.Formula) -> ast.Formula:
        self.changed = False
        return node.accept(self)

    def _combine(self, cls, left: ast.Formula, right: ast.Formula) -> ast.Formula:
        if cls is self._inner:
            if isinstance(left, self._outer):
                self.changed = True
                return self._outer(
                    self._inner(left.left, right), self._inner(left.right, right)
                )
            if isinstance(right, self._outer):
                self.changed = True
                return self._outer(
                    self._inner(left, right.left), self._inner(left, right.right)
                )
        return cls(left, right)

    def visit_atom(self, n: ast.Atom) -> ast.Formula:
        return n

    def visit_not(self, n: ast.Not) -> ast.Formula:
        return n

    def visit_and(self, n: ast.And) -> ast.Formula:
        return self._combine(ast.And, n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: ast.Or) -> ast.Formula:
        return self._combine(ast.Or, n.left.accept(self), n.right.accept(self))

    def visit_implies(self, n: ast.Implies):
        raise ClausificationError(f"Matrix is not in negation normal form: {n}")

    def visit_iff(self, n: ast.Iff):
        raise ClausificationError(f"Matrix is not in negation normal form: {n}")

    def visit_forall(self, n: ast.ForAll) -> ast.Formula:
        return n

    def visit_exists(self, n: ast.Exists) -> ast.Formula:
        return n


def _normalize(
    matrix: ast.Formula,
    outer: Type[ast.BinaryFormula],
    inner: Type[ast.BinaryFormula],
    label: str,
    budget: Optional[ResourceBudget],
) -> ast.Formula:
    logger = get_logger()
    logger.debug(f"Starting {label} conversion of {type(matrix).__name__}")

    distributor = _Distributor(outer, inner)
    current = matrix
    passes = 0
    while True:
        rewritten = distributor.run(current)
        passes += 1
        if budget is not None:
            budget.check(rewritten, f"{label} pass {passes}")
        current = rewritten
        if not distributor.changed:
            break

    logger.debug(f"{label} conversion reached fixpoint after {passes} passes")
    return current


def to_cnf(matrix: ast.Formula, budget: Optional[ResourceBudget] = None) -> ast.Formula:
    """Return the conjunctive normal form of a quantifier-free NNF matrix.

    Raises:
        ClausificationError: The matrix still contains → or ↔
        ResourceExceededError: The budget was exceeded
    """
    return _normalize(matrix, ast.And, ast.Or, "CNF", budget)


def to_dnf(matrix: ast.Formula, budget: Optional[ResourceBudget] = None) -> ast.Formula:
    """Return the disjunctive normal form of a quantifier-free NNF matrix.

    Raises:
        ClausificationError: The matrix still contains → or ↔
        ResourceExceededError: The budget was exceeded
    """
    return _normalize(matrix, ast.Or, ast.And, "DNF", budget)


def _spine(formula: ast.Formula, cls: Type[ast.BinaryFormula]) -> List[ast.Formula]:
    items: List[ast.Formula] = []
    stack = [formula]
    while stack:
        node = stack.pop()
        if isinstance(node, cls):
            stack.extend((node.right, node.left))
        else:
            items.append(node)
    return items


def conjuncts(formula: ast.Formula) -> List[ast.Formula]:
    """Split ``formula`` at its ∧ nodes, left to right."""
    return _spine(formula, ast.And)


def disjuncts(formula: ast.Formula) -> List[ast.Formula]:
    """Split ``formula`` at its ∨ nodes, left to right."""
    return _spine(formula, ast.Or)


def is_cnf(formula: ast.Formula) -> bool:
    """True when ``formula`` is a conjunction of disjunctions of literals."""
    return all(
        all(ast.is_literal(lit) for lit in disjuncts(clause))
        for clause in conjuncts(formula)
    )


def is_dnf(formula: ast.Formula) -> bool:
    """True when ``formula`` is a disjunction of conjunctions of literals."""
    return all(
        all(ast.is_literal(lit) for lit in conjuncts(term))
        for term in disjuncts(formula)
    )
