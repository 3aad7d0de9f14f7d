# normalform/renamer.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Capture-avoiding renaming of bound variables

"""Alpha-renaming of bound variables.

After renaming, every quantifier in the tree binds a distinct name and no
bound name coincides with a free variable, which lets the prenex stage pull
quantifiers out of conjunctions and disjunctions without capturing anything.

Renaming is scope aware: a quantifier's new name replaces the old one only
inside that quantifier's body. Occurrences outside the scope, and occurrences
bound by an inner quantifier reusing the same surface name, are left alone.
"""

from __future__ import annotations
import itertools
from typing import Dict, List, Set
from parser import ast_nodes as ast
from utils.logger import get_logger


def free_variables(formula: ast.Formula) -> Set[str]:
    """Return the names of variables occurring free in ``formula``."""
    return _free(formula, frozenset())


def _free(formula: ast.Formula, bound: frozenset) -> Set[str]:
    if isinstance(formula, ast.Atom):
        return {name for name in formula.variable_names() if name not in bound}
    if isinstance(formula, ast.Not):
        return _free(formula.operand, bound)
    if isinstance(formula, ast.BinaryFormula):
        return _free(formula.left, bound) | _free(formula.right, bound)
    if isinstance(formula, ast.QuantifiedFormula):
        return _free(formula.body, bound | {formula.variable})
    raise TypeError(f"Unknown formula node: {type(formula).__name__}")


def bound_variables(formula: ast.Formula) -> List[str]:
    """Return the variable bound by each quantifier, outside-in and left to right."""
    if isinstance(formula, ast.Atom):
        return []
    if isinstance(formula, ast.Not):
        return bound_variables(formula.operand)
    if isinstance(formula, ast.BinaryFormula):
        return bound_variables(formula.left) + bound_variables(formula.right)
    if isinstance(formula, ast.QuantifiedFormula):
        return [formula.variable] + bound_variables(formula.body)
    raise TypeError(f"Unknown formula node: {type(formula).__name__}")


def variable_names(formula: ast.Formula) -> Set[str]:
    """Return every variable name in ``formula``, bound or free."""
    names = set(bound_variables(formula))
    stack = [formula]
    while stack:
        node = stack.pop()
        if isinstance(node, ast.Atom):
            names.update(node.variable_names())
        elif isinstance(node, ast.Not):
            stack.append(node.operand)
        elif isinstance(node, ast.BinaryFormula):
            stack.extend((node.left, node.right))
        elif isinstance(node, ast.QuantifiedFormula):
            stack.append(node.body)
    return names


class AlphaRenamer(ast.Visitor):
    """Gives every quantifier in a formula a globally unique variable name.

    The first quantifier to bind a name keeps it unless the name also occurs
    free; later quantifiers binding a taken name get ``<name><N>``, with N drawn
    from a counter owned by this instance.

    Attributes:
        _scope: Surface name to replacement name for the quantifiers in scope
        _taken: Names already bound by a visited quantifier or occurring free
        _reserved: Every name occurring in the input, never handed out as fresh
    """

    def __init__(self):
        self._counter = itertools.count(1)
        self._scope: Dict[str, str] = {}
        self._taken: Set[str] = set()
        self._reserved: Set[str] = set()

    def transform(self, root: ast.Formula) -> ast.Formula:
        """Return ``root`` with all bound variables renamed apart."""
        logger = get_logger()
        logger.debug(f"Starting bound variable renaming of {type(root).__name__}")

        self._scope = {}
        self._taken = free_variables(root)
        self._reserved = variable_names(root)
        result = root.accept(self)

        logger.debug(f"Bound variable renaming complete: {result}")
        return result

    def _fresh(self, name: str) -> str:
        while True:
            candidate = f"{name}{next(self._counter)}"
            if candidate not in self._taken and candidate not in self._reserved:
                return candidate

    def _rename_quantifier(self, n: ast.QuantifiedFormula, factory) -> ast.Formula:
        old_name = n.variable
        new_name = self._fresh(old_name) if old_name in self._taken else old_name
        self._taken.add(new_name)

        if new_name != old_name:
            get_logger().debug(f"Renaming bound variable {old_name} -> {new_name}")

        had_outer = old_name in self._scope
        outer = self._scope.get(old_name)
        self._scope[old_name] = new_name
        try:
            body = n.body.accept(self)
        finally:
            if had_outer:
                self._scope[old_name] = outer
            else:
                del self._scope[old_name]

        return factory(new_name, body)

    def visit_atom(self, n: ast.Atom) -> ast.Formula:
        mapping = {
            old: ast.Variable(new) for old, new in self._scope.items() if old != new
        }
        return n.substitute(mapping)

    def visit_not(self, n: ast.Not) -> ast.Formula:
        return ast.Not(n.operand.accept(self))

    def visit_and(self, n: ast.And) -> ast.Formula:
        return ast.And(n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: ast.Or) -> ast.Formula:
        return ast.Or(n.left.accept(self), n.right.accept(self))

    def visit_implies(self, n: ast.Implies) -> ast.Formula:
        return ast.Implies(n.left.accept(self), n.right.accept(self))

    def visit_iff(self, n: ast.Iff) -> ast.Formula:
        return ast.Iff(n.left.accept(self), n.right.accept(self))

    def visit_forall(self, n: ast.ForAll) -> ast.Formula:
        return self._rename_quantifier(n, ast.ForAll)

    def visit_exists(self, n: ast.Exists) -> ast.Formula:
        return self._rename_quantifier(n, ast.Exists)


def rename(formula: ast.Formula) -> ast.Formula:
    """Rename the bound variables of ``formula`` apart."""
    return AlphaRenamer().transform(formula)
