# tests/integration_tests/test_conversion_scenarios.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# End-to-end conversion scenarios through the pipeline orchestrator

"""Integration tests for FormulaConverter.

Each scenario runs a formula through the full pipeline and checks the step
trace, the normal forms, the clause set and the Horn partition together.
"""

import sys
import pytest
from parser import parse, parse_horn
from parser.grammar import _FOLParser
from parser.ast_nodes import Notation
from parser.exceptions import ErrorKind
from normalform import NNFTransformer, is_cnf, is_dnf, free_variables
from normalform.clausifier import contains_quantifier
from core import (
    ConversionConfig,
    ConversionError,
    FormulaConverter,
    convert_formula,
)
from core.converter import recursion_headroom
from core.result import (
    CLAUSAL_LABEL,
    ELIMINATION_LABEL,
    HORN_LABEL,
    NNF_LABEL,
    PCNF_LABEL,
    PDNF_LABEL,
    PRENEX_LABEL,
    RENAMING_LABEL,
    SKOLEM_LABEL,
)
from utils.examples import EXAMPLE_FORMULAS
from utils.logger import get_logger


class TestConversionScenarios:
    """End-to-end conversion scenarios."""

    def setup_method(self):
        """Initialize converter and logger for each test method."""
        self.converter = FormulaConverter()
        self.logger = get_logger()

    def test_propositional_implication(self):
        """P → Q becomes the rule Q :- P."""
        result = self.converter.convert("P \\rightarrow Q")

        steps = dict(result.step_pairs())
        assert steps[ELIMINATION_LABEL] == "¬P ∨ Q"
        assert steps[NNF_LABEL] == "¬P ∨ Q"
        assert result.clausal_form() == "{ ¬P ∨ Q }"
        assert [str(h) for h in result.horn] == ["Q :- P."]
        assert result.non_horn == ()
        assert result.formula_type == "propositional"

    def test_universal_implication(self):
        """∀x (P(x) → Q(x)) becomes the rule Q(x) :- P(x)."""
        result = self.converter.convert("\\forall x (P(x) \\rightarrow Q(x))")

        steps = dict(result.step_pairs())
        assert steps[ELIMINATION_LABEL] == "∀x (¬P(x) ∨ Q(x))"
        assert [str(b) for b in result.prenex.prefix] == ["∀x"]
        assert str(result.prenex.matrix) == "¬P(x) ∨ Q(x)"
        assert result.clausal_form() == "{ ¬P(x) ∨ Q(x) }"
        assert [str(h) for h in result.horn] == ["Q(x) :- P(x)."]
        assert result.formula_type == "first-order"

    def test_existential_is_skolemized(self):
        """∃x P(x) becomes the fact P(sk1)."""
        result = self.converter.convert("\\exists x P(x)")

        assert str(result.skolem_form) == "P(sk1)"
        assert result.clausal_form() == "{ P(sk1) }"
        assert [str(h) for h in result.horn] == ["P(sk1)."]

    def test_negated_conjunction_is_goal(self):
        """¬(P ∧ Q) is a Horn goal, not a non-Horn clause."""
        result = self.converter.convert("\\neg (P \\land Q)")

        assert dict(result.step_pairs())[NNF_LABEL] == "¬P ∨ ¬Q"
        assert result.clausal_form() == "{ ¬P ∨ ¬Q }"
        assert [str(h) for h in result.horn] == [":- P, Q."]
        assert result.non_horn == ()

    def test_empty_input_is_syntax_error(self):
        """Empty input fails with a syntax error."""
        with pytest.raises(ConversionError) as exc_info:
            self.converter.convert("")

        assert exc_info.value.kind is ErrorKind.SYNTAX
        assert exc_info.value.recoverable

    def test_unbalanced_parenthesis_reports_end_of_input(self):
        """A missing ')' is reported at the end of the input."""
        text = "(P \\land Q"
        with pytest.raises(ConversionError) as exc_info:
            self.converter.convert(text)

        error = exc_info.value
        assert error.kind is ErrorKind.SYNTAX
        assert error.position == len(text)
        assert str(error).startswith(f"SyntaxError at position {len(text)}")

    def test_skolem_function_of_universal(self):
        """∀x ∃y ... Skolemizes y as a function of x."""
        result = self.converter.convert(
            "\\forall x \\exists y (P(x) \\rightarrow (Q(x,y) \\land R(y)))"
        )

        assert str(result.skolem_form) == (
            "∀x ((¬P(x) ∨ Q(x, sk1(x))) ∧ (¬P(x) ∨ R(sk1(x))))"
        )
        assert [str(h) for h in result.horn] == [
            "Q(x, sk1(x)) :- P(x).",
            "R(sk1(x)) :- P(x).",
        ]

    def test_non_horn_clause(self):
        """(A ∧ B) → (C ∨ D) yields a clause with two positive literals."""
        result = self.converter.convert("(A \\land B) \\rightarrow (C \\lor D)")

        assert result.horn == ()
        assert [str(c) for c in result.non_horn] == ["¬A ∨ ¬B ∨ C ∨ D"]
        assert result.horn_summary() == "Non-Horn clauses:\n{ ¬A ∨ ¬B ∨ C ∨ D }"

    def test_renaming_step(self):
        """Reused quantifier names are renamed apart in the trace."""
        result = self.converter.convert(
            "\\forall x P(x) \\land \\exists x Q(x)"
        )
        steps = dict(result.step_pairs())
        assert steps[RENAMING_LABEL] == "∀x P(x) ∧ ∃x1 Q(x1)"
        assert steps[PRENEX_LABEL] == "∀x ∃x1 (P(x) ∧ Q(x1))"
        assert result.clausal_form() == "{ P(x), Q(sk1(x)) }"

    def test_convert_formula_shortcut(self):
        """The module-level helper behaves like a fresh converter."""
        assert convert_formula("P").clausal_form() == "{ P }"


class TestConversionInvariants:
    """Structural invariants over the bundled examples."""

    @pytest.mark.parametrize("formula", EXAMPLE_FORMULAS)
    def test_result_invariants(self, formula, assert_equivalent):
        """Test the shape of every result and the equivalences that must hold.

        Args:
            formula: Example formula
        """
        result = FormulaConverter().convert(formula)

        assert [label for label, _ in result.step_pairs()] == [
            ELIMINATION_LABEL,
            NNF_LABEL,
            RENAMING_LABEL,
            PRENEX_LABEL,
        ]
        assert not contains_quantifier(result.pcnf.matrix)
        assert is_cnf(result.pcnf.matrix)
        assert is_dnf(result.pdnf.matrix)
        assert_equivalent(result.formula, result.pcnf.to_formula())
        assert_equivalent(result.formula, result.pdnf.to_formula())
        assert len(result.horn) + len(result.non_horn) == len(result.clauses)

    @pytest.mark.parametrize("formula", EXAMPLE_FORMULAS)
    def test_rendered_outputs_reparse(self, formula):
        """Test that clause and Horn strings read back to the same literals.

        Args:
            formula: Example formula
        """
        result = FormulaConverter().convert(formula)

        for clause in result.clauses:
            reparsed = parse(clause.render(Notation.UNICODE))
            assert str(reparsed) == str(clause)

        for horn in result.horn:
            reparsed = parse_horn(str(horn)).to_clause()
            assert {str(lit) for lit in reparsed} == {
                str(lit) for lit in horn.to_clause()
            }

    @pytest.mark.parametrize("formula", EXAMPLE_FORMULAS)
    def test_latex_rendering_reparses(self, formula):
        """Test that every LaTeX step re-parses to the recorded formula.

        Args:
            formula: Example formula
        """
        result = FormulaConverter(ConversionConfig(notation=Notation.LATEX)).convert(
            formula
        )
        for step in result.steps:
            label, text = step.render(Notation.LATEX)
            assert not set(text) & set("¬∧∨→↔∀∃"), label
            assert parse(text) == step.formula, label

    def test_free_variables_survive(self):
        """Test that free variables stay free through the pipeline."""
        result = FormulaConverter().convert("P(y) \\lor \\forall y Q(y)")
        assert free_variables(result.prenex.to_formula()) == {"y"}
        assert result.clausal_form() == "{ P(y) ∨ Q(y1) }"


class TestResultPresentation:
    """Tests for the views offered to the presentation layer."""

    def test_rendering_pairs_in_pipeline_order(self):
        """Test the labels of every displayable section."""
        result = FormulaConverter().convert("P \\rightarrow Q")
        labels = [label for label, _ in result.rendering_pairs()]
        assert labels == [
            ELIMINATION_LABEL,
            NNF_LABEL,
            RENAMING_LABEL,
            PRENEX_LABEL,
            PCNF_LABEL,
            PDNF_LABEL,
            SKOLEM_LABEL,
            CLAUSAL_LABEL,
            HORN_LABEL,
        ]
        assert dict(result.rendering_pairs())[HORN_LABEL] == "Horn clauses:\nQ :- P."

    def test_to_dict(self):
        """Test the JSON-ready view of a result."""
        result = FormulaConverter().convert("\\forall x (P(x) \\rightarrow Q(x))")
        document = result.to_dict()

        assert document["formula_type"] == "first-order"
        assert document["predicates"] == [
            {"name": "P", "arity": 1},
            {"name": "Q", "arity": 1},
        ]
        assert document["clauses"] == ["¬P(x) ∨ Q(x)"]
        assert document["horn"] == [{"kind": "rule", "text": "Q(x) :- P(x)."}]
        assert document["non_horn"] == []
        assert len(document["steps"]) == 4

    def test_latex_notation(self):
        """Test that results render in LaTeX when configured."""
        config = ConversionConfig(notation=Notation.LATEX)
        result = FormulaConverter(config).convert("\\neg (P \\land Q)")

        assert dict(result.step_pairs())[NNF_LABEL] == "\\neg P \\lor \\neg Q"
        assert result.clausal_form() == "{ \\neg P \\lor \\neg Q }"


class TestConversionErrors:
    """Tests for the error boundary of the orchestrator."""

    def test_resource_limit(self):
        """Test that CNF blow-up past the node limit is reported."""
        formula = " \\lor ".join(f"(A{i} \\land B{i})" for i in range(1, 10))
        converter = FormulaConverter(ConversionConfig(max_nodes=500))

        with pytest.raises(ConversionError) as exc_info:
            converter.convert(formula)

        assert exc_info.value.kind is ErrorKind.RESOURCE_EXCEEDED
        assert exc_info.value.recoverable
        assert isinstance(exc_info.value.__cause__, Exception)

    def test_recursion_error_is_resource_error(self, monkeypatch):
        """Test that interpreter recursion exhaustion is a resource error."""

        def exhausted(self, root):
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr(NNFTransformer, "transform", exhausted)

        with pytest.raises(ConversionError) as exc_info:
            FormulaConverter(ConversionConfig.unlimited()).convert("\\neg \\neg P")

        assert exc_info.value.kind is ErrorKind.RESOURCE_EXCEEDED
        assert isinstance(exc_info.value.__cause__, RecursionError)

    def test_recursion_error_while_parsing_is_resource_error(self, monkeypatch):
        """Test that the parser does not relabel recursion exhaustion."""

        def exhausted(self, source):
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr(_FOLParser, "parse", exhausted)

        with pytest.raises(ConversionError) as exc_info:
            FormulaConverter().convert("P")

        assert exc_info.value.kind is ErrorKind.RESOURCE_EXCEEDED

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_nodes": 0}, {"time_limit": -1.0}, {"skolem_prefix": "1sk"}],
    )
    def test_invalid_config(self, kwargs):
        """Test that invalid settings are rejected on construction.

        Args:
            kwargs: Invalid ConversionConfig arguments
        """
        with pytest.raises(ValueError):
            ConversionConfig(**kwargs)

    def test_converter_is_reusable_after_error(self):
        """Test that a failed request leaves no state behind."""
        converter = FormulaConverter()
        with pytest.raises(ConversionError):
            converter.convert("P \\land")
        assert converter.convert("\\exists x P(x)").clausal_form() == "{ P(sk1) }"


class TestDeeplyNestedFormulas:
    """Long connective chains stay within the interpreter's limits."""

    def test_long_conjunction_chain(self):
        """Test a chain of 1000 conjuncts without any resource limit."""
        formula = " \\land ".join(f"A{i}" for i in range(1000))
        limit_before = sys.getrecursionlimit()

        result = FormulaConverter(ConversionConfig.unlimited()).convert(formula)

        assert [str(c) for c in result.clauses] == [f"A{i}" for i in range(1000)]
        assert [str(h) for h in result.horn] == [f"A{i}." for i in range(1000)]
        assert result.pcnf.render().count("∧") == 999
        assert sys.getrecursionlimit() == limit_before

    def test_long_implication_chain(self):
        """Test a right-nested chain of 400 implications under the default limits."""
        formula = " \\rightarrow ".join(f"A{i}" for i in range(401))

        result = FormulaConverter().convert(formula)

        assert len(result.clauses) == 1
        assert len(result.clauses[0]) == 401
        body = ", ".join(f"A{i}" for i in range(400))
        assert [str(h) for h in result.horn] == [f"A400 :- {body}."]

    def test_deep_negation_chain(self):
        """Test that 2000 stacked negations cancel out."""
        result = FormulaConverter().convert("\\neg " * 2000 + "P")

        assert dict(result.step_pairs())[NNF_LABEL] == "P"
        assert result.clausal_form() == "{ P }"

    def test_headroom_is_restored_after_nested_requests(self):
        """Test that overlapping headroom requests restore the original limit."""
        limit_before = sys.getrecursionlimit()

        with recursion_headroom(500):
            assert sys.getrecursionlimit() == limit_before + 500
            with recursion_headroom(2000):
                assert sys.getrecursionlimit() == limit_before + 2000
            assert sys.getrecursionlimit() == limit_before + 500

        assert sys.getrecursionlimit() == limit_before
