# tests/conftest.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Clausa conversion tests.

This module provides pytest configuration, fixtures, and utilities for testing
the normal form converter. It ensures proper module path setup and provides
common test infrastructure for all test modules.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- A finite-domain evaluator for checking that two formulas are equivalent
"""

import sys
import itertools
import random
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Initialize test environment and verify module availability.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import core
        import normalform
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


class FiniteModel:
    """Interpretation of every predicate and function symbol over ``{0, 1}``.

    Symbol tables are derived from a seed, so the same seed always gives the
    same interpretation. Unknown free variables are read from ``assignment``.
    """

    DOMAIN = (0, 1)

    def __init__(self, seed: int):
        self.seed = seed

    def _table(self, kind: str, name: str, values) -> int:
        rng = random.Random(f"{self.seed}:{kind}:{name}:{values}")
        return rng.choice(self.DOMAIN)

    def term(self, term, assignment):
        from parser.ast_nodes import FunctionApplication

        if isinstance(term, FunctionApplication):
            values = tuple(self.term(arg, assignment) for arg in term.args)
            return self._table("fn", term.name, values)
        if term.name in assignment:
            return assignment[term.name]
        return self._table("const", term.name, ())

    def holds(self, formula, assignment=None) -> bool:
        from parser import ast_nodes as ast

        assignment = assignment or {}
        if isinstance(formula, ast.Atom):
            values = tuple(self.term(arg, assignment) for arg in formula.args)
            return bool(self._table("pred", formula.name, values))
        if isinstance(formula, ast.Not):
            return not self.holds(formula.operand, assignment)
        if isinstance(formula, ast.And):
            return self.holds(formula.left, assignment) and self.holds(
                formula.right, assignment
            )
        if isinstance(formula, ast.Or):
            return self.holds(formula.left, assignment) or self.holds(
                formula.right, assignment
            )
        if isinstance(formula, ast.Implies):
            return (not self.holds(formula.left, assignment)) or self.holds(
                formula.right, assignment
            )
        if isinstance(formula, ast.Iff):
            return self.holds(formula.left, assignment) == self.holds(
                formula.right, assignment
            )
        if isinstance(formula, ast.QuantifiedFormula):
            outcomes = (
                self.holds(formula.body, {**assignment, formula.variable: value})
                for value in self.DOMAIN
            )
            if isinstance(formula, ast.ForAll):
                return all(outcomes)
            return any(outcomes)
        raise TypeError(f"Unknown formula node: {type(formula).__name__}")


def _free_names(*formulas):
    from normalform import free_variables

    names = set()
    for formula in formulas:
        names |= free_variables(formula)
    return sorted(names)


def equivalent(left, right, seeds: int = 24) -> bool:
    """Check that two formulas agree in a range of finite models.

    Every seed gives a different interpretation of the symbols; within each
    model every assignment of the free variables is tried.
    """
    names = _free_names(left, right)
    for seed in range(seeds):
        model = FiniteModel(seed)
        for values in itertools.product(FiniteModel.DOMAIN, repeat=len(names)):
            assignment = dict(zip(names, values))
            if model.holds(left, assignment) != model.holds(right, assignment):
                return False
    return True


@pytest.fixture
def assert_equivalent():
    """Provide an assertion helper for semantic equivalence.

    Returns:
        Callable[[Formula, Formula], None]: Fails the test when the formulas
        disagree in some finite model
    """

    def check(left, right):
        assert equivalent(left, right), f"{left} is not equivalent to {right}"

    return check


@pytest.fixture
def propositional_formula():
    """Provide a propositional formula exercising every connective.

    Returns:
        str: Formula in LaTeX-style notation
    """
    return "\\neg (P \\land Q) \\leftrightarrow (\\neg P \\lor \\neg Q)"


@pytest.fixture
def first_order_formula():
    """Provide a first-order formula with nested quantifiers.

    Returns:
        str: Formula in LaTeX-style notation
    """
    return "\\forall x \\exists y (P(x) \\rightarrow (Q(x,y) \\land R(y)))"
