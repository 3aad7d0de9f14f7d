# normalform/eliminator.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# AST transformer removing implications and biconditionals

"""Rewrites implications and biconditionals into ¬, ∧ and ∨.

Rules, applied bottom-up so nested connectives are eliminated too:

    A ↔ B  ⟶  (A → B) ∧ (B → A)  ⟶  (¬A ∨ B) ∧ (¬B ∨ A)
    A → B  ⟶  ¬A ∨ B

The result contains only Atom, Not, And, Or, ForAll and Exists nodes.
"""

from __future__ import annotations
from typing import Dict, Tuple
from parser import ast_nodes as ast
from utils.logger import get_logger


class ConnectiveEliminator(ast.Visitor):
    """Removes ``Implies`` and ``Iff`` nodes from a formula tree.

    Attributes:
        _memo: Cache for transformed subformulas; shared subtrees are rewritten once
    """

    def __init__(self):
        self._memo: Dict[int, Tuple[ast.Formula, ast.Formula]] = {}

    def transform(self, root: ast.Formula) -> ast.Formula:
        """Return ``root`` with every implication and biconditional eliminated."""
        logger = get_logger()
        logger.debug(f"Starting connective elimination of {type(root).__name__}")

        self._memo.clear()
        result = self._visit(root)

        logger.debug(f"Connective elimination complete: {result}")
        return result

    def _visit(self, node: ast.Formula) -> ast.Formula:
        cached = self._memo.get(id(node))
        if cached is not None:
            return cached[1]

        result = node.accept(self)
        # Keyed by identity; the node is kept alive so its id is not reused
        self._memo[id(node)] = (node, result)
        return result

    def visit_atom(self, n: ast.Atom) -> ast.Formula:
        return n

    def visit_not(self, n: ast.Not) -> ast.Formula:
        return ast.Not(self._visit(n.operand))

    def visit_and(self, n: ast.And) -> ast.Formula:
        return ast.And(self._visit(n.left), self._visit(n.right))

    def visit_or(self, n: ast.Or) -> ast.Formula:
        return ast.Or(self._visit(n.left), self._visit(n.right))

    def visit_implies(self, n: ast.Implies) -> ast.Formula:
        return ast.Or(ast.Not(self._visit(n.left)), self._visit(n.right))

    def visit_iff(self, n: ast.Iff) -> ast.Formula:
        # (A → B) ∧ (B → A), each implication eliminated in turn
        return ast.And(
            self._visit(ast.Implies(n.left, n.right)),
            self._visit(ast.Implies(n.right, n.left)),
        )

    def visit_forall(self, n: ast.ForAll) -> ast.Formula:
        return ast.ForAll(n.variable, self._visit(n.body))

    def visit_exists(self, n: ast.Exists) -> ast.Formula:
        return ast.Exists(n.variable, self._visit(n.body))


def eliminate(formula: ast.Formula) -> ast.Formula:
    """Eliminate implications and biconditionals from ``formula``."""
    return ConnectiveEliminator().transform(formula)
