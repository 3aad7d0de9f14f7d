# tests/normalform_tests/test_prenex.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Test suite for prenex form extraction

"""Test suite for the prenex transformation.

The prefix collects every quantifier of an alpha-renamed NNF formula in
left-to-right, outside-in order; rebuilding prefix and matrix gives a formula
equivalent to the input.
"""

import pytest
from parser import parse
from parser import ast_nodes as ast
from parser.ast_nodes import And, Atom, Implies, Or, Variable
from normalform import (
    ClausificationError,
    PrenexTransformer,
    Quantifier,
    QuantifierBinding,
    eliminate,
    rename,
    to_nnf,
    to_prenex,
)
from normalform.clausifier import contains_quantifier
from utils.logger import get_logger


def px(name: str, *variables: str) -> Atom:
    return Atom(name, tuple(Variable(v) for v in variables))


def _prepare(text: str):
    return rename(to_nnf(eliminate(parse(text))))


A = Quantifier.FORALL
E = Quantifier.EXISTS


class TestPrenexTransformation:
    """Test cases for prenex form extraction."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    PREFIX_CASES = [
        ("P", (), "P"),
        ("\\forall x P(x)", ((A, "x"),), "P(x)"),
        (
            "\\forall x \\exists y R(x, y)",
            ((A, "x"), (E, "y")),
            "R(x, y)",
        ),
        (
            "\\forall x P(x) \\lor \\exists y Q(y)",
            ((A, "x"), (E, "y")),
            "P(x) ∨ Q(y)",
        ),
        (
            "\\exists x (P(x) \\land Q(x)) \\rightarrow \\forall y R(y)",
            ((A, "x"), (A, "y")),
            "¬P(x) ∨ ¬Q(x) ∨ R(y)",
        ),
        (
            "\\forall x P(x) \\land \\forall x Q(x)",
            ((A, "x"), (A, "x1")),
            "P(x) ∧ Q(x1)",
        ),
    ]

    @pytest.mark.parametrize("formula, prefix, matrix", PREFIX_CASES)
    def test_prefix_and_matrix(self, formula, prefix, matrix):
        """Test prefix order and matrix shape.

        Args:
            formula: Input formula
            prefix: Expected (quantifier, variable) pairs, outermost first
            matrix: Expected rendered matrix
        """
        result = to_prenex(_prepare(formula))
        self.logger.debug(f"Prenex of {formula}: {result}")

        assert result.prefix == tuple(QuantifierBinding(k, v) for k, v in prefix)
        assert str(result.matrix) == matrix
        assert not contains_quantifier(result.matrix)

    FORMULAS = [
        "\\forall x (P(x) \\rightarrow Q(x))",
        "\\exists x (P(x) \\land Q(x)) \\rightarrow \\forall y R(y)",
        "\\forall x \\exists y (P(x) \\rightarrow (Q(x,y) \\land R(y)))",
        "\\neg \\forall x (P(x) \\lor \\exists y \\neg R(x, y))",
        "(\\forall x P(x) \\leftrightarrow \\exists x Q(x))",
        "P(z) \\land \\exists z \\forall x R(x, z)",
    ]

    @pytest.mark.parametrize("formula", FORMULAS)
    def test_prenex_is_equivalent(self, formula, assert_equivalent):
        """Test that prefix plus matrix is equivalent to the NNF input.

        Args:
            formula: Input formula
        """
        nnf = _prepare(formula)
        prenex = to_prenex(nnf)

        assert not contains_quantifier(prenex.matrix)
        assert_equivalent(nnf, prenex.to_formula())

    def test_negated_quantifier_outside_nnf(self):
        """Test that a negated quantifier is lifted with its dual."""
        formula = ast.Not(ast.ForAll("x", px("P", "x")))
        result = PrenexTransformer().transform(formula)

        assert result.prefix == (QuantifierBinding(E, "x"),)
        assert result.matrix == ast.Not(px("P", "x"))

    @pytest.mark.parametrize(
        "formula",
        [Implies(Atom("P"), Atom("Q")), And(Atom("P"), ast.Iff(Atom("Q"), Atom("R")))],
    )
    def test_uneliminated_connectives_raise(self, formula):
        """Test that → and ↔ reaching the prenex stage are reported.

        Args:
            formula: Formula still containing → or ↔
        """
        with pytest.raises(ClausificationError):
            to_prenex(formula)

    def test_prenex_rendering(self):
        """Test that the prenex form renders with its prefix."""
        result = to_prenex(_prepare("\\forall x \\exists y R(x, y)"))
        assert str(result) == "∀x ∃y R(x, y)"
        assert [str(binding) for binding in result.prefix] == ["∀x", "∃y"]

    def test_matrix_is_rebuilt_with_same_prefix(self):
        """Test that with_matrix keeps the prefix."""
        result = to_prenex(_prepare("\\forall x P(x)"))
        replaced = result.with_matrix(Or(px("P", "x"), Atom("Q")))
        assert replaced.prefix == result.prefix
        assert str(replaced) == "∀x (P(x) ∨ Q)"
