# tests/normalform_tests/test_horn.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Test suite for Horn clause classification and formatting

"""Test suite for the Horn classifier.

Clauses with at most one positive literal are written as facts, rules or
goals; the rest are kept as non-Horn clauses. Every formatted Horn clause
must parse back to the clause it came from.
"""

import pytest
from parser import parse_horn
from parser.ast_nodes import Atom, Clause, HornKind, Literal, Variable
from normalform import InvalidHornClauseError, classify, format_horn
from utils.logger import get_logger


def lit(name: str, positive: bool = True, *variables: str) -> Literal:
    return Literal(Atom(name, tuple(Variable(v) for v in variables)), positive)


def clause(*literals: Literal) -> Clause:
    return Clause(tuple(literals))


class TestHornFormatting:
    """Test cases for fact, rule and goal formatting."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    FORMAT_CASES = [
        (clause(lit("P")), HornKind.FACT, "P."),
        (clause(lit("P", False), lit("Q")), HornKind.RULE, "Q :- P."),
        (
            clause(lit("P", False, "x"), lit("Q", True, "x")),
            HornKind.RULE,
            "Q(x) :- P(x).",
        ),
        (
            clause(lit("A", False), lit("B", False), lit("C")),
            HornKind.RULE,
            "C :- A, B.",
        ),
        (clause(lit("P", False), lit("Q", False)), HornKind.GOAL, ":- P, Q."),
        (clause(), HornKind.GOAL, ":- ."),
    ]

    @pytest.mark.parametrize("source, kind, expected", FORMAT_CASES)
    def test_format_horn(self, source, kind, expected):
        """Test the logic-programming form of a Horn clause.

        Args:
            source: Clause to format
            kind: Expected Horn clause kind
            expected: Expected text
        """
        horn = format_horn(source)
        assert horn.kind is kind
        assert str(horn) == expected

    @pytest.mark.parametrize("source, kind, expected", FORMAT_CASES)
    def test_horn_text_round_trip(self, source, kind, expected):
        """Test that formatted text parses back to the same literal set.

        Args:
            source: Clause to format
            kind: Expected Horn clause kind
            expected: Expected text
        """
        reparsed = parse_horn(str(format_horn(source)))
        assert reparsed.kind is kind
        assert reparsed.to_clause() == source

    def test_multiple_positive_literals_raise(self):
        """Test that a non-Horn clause cannot be formatted as Horn."""
        with pytest.raises(InvalidHornClauseError) as exc_info:
            format_horn(clause(lit("P"), lit("Q")))
        assert "2 positive literals" in str(exc_info.value)


class TestHornClassification:
    """Test cases for partitioning clauses."""

    def test_partition_is_complete_and_ordered(self):
        """Test that every clause lands in exactly one group, in order."""
        clauses = (
            clause(lit("P")),
            clause(lit("P"), lit("Q")),
            clause(lit("R", False), lit("S")),
            clause(lit("A"), lit("B"), lit("C", False)),
            clause(lit("T", False)),
        )

        partition = classify(clauses)

        assert [str(h) for h in partition.horn] == ["P.", "S :- R.", ":- T."]
        assert [str(c) for c in partition.non_horn] == ["P ∨ Q", "A ∨ B ∨ ¬C"]
        assert len(partition.horn) + len(partition.non_horn) == len(clauses)

    def test_summary_lists_both_groups(self):
        """Test the text summary of a mixed partition."""
        partition = classify((clause(lit("P", False), lit("Q")), clause(lit("P"), lit("Q"))))
        assert partition.summary() == (
            "Horn clauses:\nQ :- P.\n\nNon-Horn clauses:\n{ P ∨ Q }"
        )

    def test_summary_without_clauses(self):
        """Test the notice shown when there is nothing to classify."""
        assert classify(()).summary() == "No clauses found."

    def test_summary_horn_only(self):
        """Test that an empty group is left out of the summary."""
        assert classify((clause(lit("P")),)).summary() == "Horn clauses:\nP."
