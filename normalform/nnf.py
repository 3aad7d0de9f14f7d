# normalform/nnf.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# AST transformer for Negation Normal Form conversion

"""Transforms formula trees into Negation Normal Form (NNF).

Negations are pushed to the atoms by structural recursion:

    ¬(A ∧ B)  ⟶  ¬A ∨ ¬B          ¬(A ∨ B)  ⟶  ¬A ∧ ¬B
    ¬¬A       ⟶  A
    ¬∀x A     ⟶  ∃x ¬A            ¬∃x A     ⟶  ∀x ¬A

A negation is carried down as a polarity flag rather than rewritten one level
at a time, so arbitrarily deep negation chains (``¬¬¬A``) reach their fixpoint
in a single traversal. Implications and biconditionals still present in the
input are eliminated on the way, which makes ``to_nnf`` total over formulas.
"""

from __future__ import annotations
from typing import Dict, Tuple
from parser import ast_nodes as ast
from .eliminator import ConnectiveEliminator
from utils.logger import get_logger


class NNFTransformer(ast.Visitor):
    """Pushes negation down to the atoms of a formula.

    Visiting a node yields its NNF; ``_negate`` yields the NNF of its negation.

    Attributes:
        _memo: Cache for positively transformed subformulas
    """

    def __init__(self):
        self._memo: Dict[int, Tuple[ast.Formula, ast.Formula]] = {}
        self._eliminator = ConnectiveEliminator()

    def transform(self, root: ast.Formula) -> ast.Formula:
        """Return the negation normal form of ``root``."""
        logger = get_logger()
        logger.debug(f"Starting NNF transformation of {type(root).__name__}")

        self._memo.clear()
        result = self._visit(root)

        logger.debug(f"NNF transformation complete: {result}")
        return result

    def _visit(self, node: ast.Formula) -> ast.Formula:
        cached = self._memo.get(id(node))
        if cached is not None:
            return cached[1]

        result = node.accept(self)
        # Keyed by identity; the node is kept alive so its id is not reused
        self._memo[id(node)] = (node, result)
        return result

    def _negate(self, node: ast.Formula) -> ast.Formula:
        """Return the NNF of ``¬node``."""
        if isinstance(node, ast.Atom):
            return ast.Not(node)

        # Double negation: ¬¬A -> A
        if isinstance(node, ast.Not):
            return self._visit(node.operand)

        # De Morgan: ¬(A ∧ B) -> ¬A ∨ ¬B
        if isinstance(node, ast.And):
            return ast.Or(self._negate(node.left), self._negate(node.right))

        # De Morgan: ¬(A ∨ B) -> ¬A ∧ ¬B
        if isinstance(node, ast.Or):
            return ast.And(self._negate(node.left), self._negate(node.right))

        # Quantifier duality
        if isinstance(node, ast.ForAll):
            return ast.Exists(node.variable, self._negate(node.body))
        if isinstance(node, ast.Exists):
            return ast.ForAll(node.variable, self._negate(node.body))

        # Implies / Iff
        return self._negate(self._eliminator.transform(node))

    def visit_atom(self, n: ast.Atom) -> ast.Formula:
        return n

    def visit_not(self, n: ast.Not) -> ast.Formula:
        return self._negate(n.operand)

    def visit_and(self, n: ast.And) -> ast.Formula:
        return ast.And(self._visit(n.left), self._visit(n.right))

    def visit_or(self, n: ast.Or) -> ast.Formula:
        return ast.Or(self._visit(n.left), self._visit(n.right))

    def visit_implies(self, n: ast.Implies) -> ast.Formula:
        return self._visit(self._eliminator.transform(n))

    def visit_iff(self, n: ast.Iff) -> ast.Formula:
        return self._visit(self._eliminator.transform(n))

    def visit_forall(self, n: ast.ForAll) -> ast.Formula:
        return ast.ForAll(n.variable, self._visit(n.body))

    def visit_exists(self, n: ast.Exists) -> ast.Formula:
        return ast.Exists(n.variable, self._visit(n.body))


def to_nnf(formula: ast.Formula) -> ast.Formula:
    """Return the negation normal form of ``formula``."""
    return NNFTransformer().transform(formula)
