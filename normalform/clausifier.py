# normalform/clausifier.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Skolemization and clause extraction from prenex CNF

"""Turns a prenex CNF formula into a flat list of clauses.

Skolemization walks the quantifier prefix left to right. Every existential
variable is replaced throughout the matrix by a fresh Skolem function applied
to the universal variables bound before it (a Skolem constant when there are
none). Universal quantifiers are then dropped: their variables are read as
implicitly universally quantified over the whole clause set.

The quantifier-free matrix is finally split at its top-level ∧ nodes into
clauses and each clause at its ∨ nodes into literals.
"""

from __future__ import annotations
import itertools
from typing import Dict, Iterable, List, Set, Tuple
from parser import ast_nodes as ast
from parser.ast_nodes import Clause, Literal
from .exceptions import ClausificationError
from .matrix import conjuncts, disjuncts
from .prenex import Quantifier, QuantifierBinding
from utils.logger import get_logger

ClauseSet = Tuple[Clause, ...]


def _substitute(formula: ast.Formula, mapping: Dict[str, ast.Term]) -> ast.Formula:
    if isinstance(formula, ast.Atom):
        return formula.substitute(mapping)
    if isinstance(formula, ast.Not):
        return ast.Not(_substitute(formula.operand, mapping))
    if isinstance(formula, ast.BinaryFormula):
        return type(formula)(
            _substitute(formula.left, mapping), _substitute(formula.right, mapping)
        )
    if isinstance(formula, ast.QuantifiedFormula):
        inner = {k: v for k, v in mapping.items() if k != formula.variable}
        return type(formula)(formula.variable, _substitute(formula.body, inner))
    raise TypeError(f"Unknown formula node: {type(formula).__name__}")


def _symbol_names(formula: ast.Formula) -> Set[str]:
    """Collect variable and function names used anywhere in ``formula``."""
    names: Set[str] = set()

    def visit_term(term: ast.Term):
        names.add(term.name)
        if isinstance(term, ast.FunctionApplication):
            for arg in term.args:
                visit_term(arg)

    stack = [formula]
    while stack:
        node = stack.pop()
        if isinstance(node, ast.Atom):
            for arg in node.args:
                visit_term(arg)
        elif isinstance(node, ast.Not):
            stack.append(node.operand)
        elif isinstance(node, ast.BinaryFormula):
            stack.extend((node.left, node.right))
        elif isinstance(node, ast.QuantifiedFormula):
            names.add(node.variable)
            stack.append(node.body)
    return names


def contains_quantifier(formula: ast.Formula) -> bool:
    """True when any ∀ or ∃ node occurs in ``formula``."""
    stack = [formula]
    while stack:
        node = stack.pop()
        if isinstance(node, ast.QuantifiedFormula):
            return True
        if isinstance(node, ast.Not):
            stack.append(node.operand)
        elif isinstance(node, ast.BinaryFormula):
            stack.extend((node.left, node.right))
    return False


class Clausifier:
    """Skolemizes a prenex CNF formula and splits it into clauses.

    Skolem symbols are numbered by a counter owned by the instance, so each
    conversion request that builds its own Clausifier starts again at ``sk1``.

    Attributes:
        skolem_prefix: Name stem of generated Skolem symbols
    """

    def __init__(self, skolem_prefix: str = "sk"):
        self.skolem_prefix = skolem_prefix
        self._counter = itertools.count(1)

    def _fresh_symbol(self, taken: Set[str]) -> str:
        while True:
            candidate = f"{self.skolem_prefix}{next(self._counter)}"
            if candidate not in taken:
                taken.add(candidate)
                return candidate

    def skolemize(
        self, prefix: Iterable[QuantifierBinding], matrix: ast.Formula
    ) -> Tuple[ast.Formula, Tuple[str, ...]]:
        """Replace the existential variables of ``prefix`` by Skolem terms.

        Args:
            prefix: Quantifier bindings, outermost first
            matrix: Quantifier-free matrix

        Returns:
            The Skolemized matrix and the universal variables, in prefix order
        """
        logger = get_logger()

        taken = _symbol_names(matrix)
        taken.update(binding.variable for binding in prefix)

        universals: List[str] = []
        mapping: Dict[str, ast.Term] = {}
        for binding in prefix:
            if binding.kind is Quantifier.FORALL:
                universals.append(binding.variable)
                continue

            symbol = self._fresh_symbol(taken)
            mapping[binding.variable] = ast.FunctionApplication(
                symbol, tuple(ast.Variable(u) for u in universals)
            )
            logger.debug(
                f"Skolemizing {binding.variable} -> {mapping[binding.variable]}"
            )

        return _substitute(matrix, mapping), tuple(universals)

    def clausify(
        self, prefix: Iterable[QuantifierBinding], cnf_matrix: ast.Formula
    ) -> ClauseSet:
        """Skolemize a prenex CNF formula and return its clauses.

        Args:
            prefix: Quantifier bindings, outermost first
            cnf_matrix: Matrix in conjunctive normal form

        Returns:
            Clauses in the order their conjuncts appear in the matrix

        Raises:
            ClausificationError: The matrix contains a quantifier or is not in CNF
        """
        prefix = tuple(prefix)
        get_logger().debug(
            f"Starting clausification with {len(prefix)} prefix quantifiers"
        )

        skolemized, _ = self.skolemize(prefix, cnf_matrix)
        return self.split(skolemized)

    def split(self, matrix: ast.Formula) -> ClauseSet:
        """Split a quantifier-free CNF matrix into clauses.

        Raises:
            ClausificationError: The matrix contains a quantifier or is not in CNF
        """
        logger = get_logger()

        if contains_quantifier(matrix):
            raise ClausificationError(
                f"Matrix still contains a quantifier after prefix removal: {matrix}"
            )

        clauses = []
        for conjunct in conjuncts(matrix):
            literals = []
            for disjunct in disjuncts(conjunct):
                if not ast.is_literal(disjunct):
                    raise ClausificationError(
                        f"Conjunct is not a disjunction of literals: {conjunct}"
                    )
                literals.append(Literal.from_formula(disjunct))
            clauses.append(Clause(tuple(literals)))

        logger.debug(f"Clausification produced {len(clauses)} clauses")
        return tuple(clauses)


def render_clause_set(clauses: Iterable[Clause], notation: ast.Notation = ast.Notation.UNICODE) -> str:
    """Render clauses as ``{ C1, C2 }``."""
    body = ", ".join(clause.render(notation) for clause in clauses)
    return f"{{ {body} }}" if body else "{ }"
