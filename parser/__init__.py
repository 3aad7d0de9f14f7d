# parser/__init__.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Formula parsing components for first-order logic expressions

"""First-order formula parsing for normal form conversion.

This module provides parsing capabilities for first-order and propositional
logic formulas written in LaTeX-style notation. The parsing pipeline converts
textual formula representations into immutable abstract syntax trees that the
normalization stages rewrite into NNF, prenex, clausal and Horn form.

Core Functions:
    parse: Converts formula strings into Abstract Syntax Trees
    parse_with_predicates: Parses and reports the predicate symbols used
    parse_horn: Reads a clause written in Horn notation back into a value

Supported Logic:
    - Boolean connectives (¬, ∧, ∨, →, ↔) and their LaTeX commands
    - Quantifiers (∀, ∃) over individual variables
    - Predicate applications over variables and function terms

Grammar Features:
    - Left-associative ∧ and ∨, right-associative → and ↔
    - Quantifiers and negation bind tightest
    - Parenthetical grouping support
    - Errors report the character position and what was expected

Example:
    >>> from parser import parse
    >>> ast = parse("\\\\forall x (P(x) \\\\rightarrow Q(x))")
    >>> str(ast)
    '∀x (P(x) → Q(x))'
"""

from dataclasses import dataclass
from typing import Tuple

from .exceptions import ErrorKind, ParseError
from .ast_nodes import Formula, HornClause
from .grammar import _FOLParser
from utils.logger import get_logger


@dataclass(frozen=True)
class ParseResult:
    """Parsed formula together with the predicate symbols it uses.

    Attributes:
        formula: Root of the parsed formula tree
        predicates: Distinct ``(name, arity)`` pairs in order of first appearance
    """

    formula: Formula
    predicates: Tuple[Tuple[str, int], ...]


def _run_parser(parser: _FOLParser, source: str):
    """Run ``parser`` over ``source``, reporting unexpected failures as ParseError.

    RecursionError propagates unchanged so callers can report it as a
    resource failure rather than a syntax error.
    """
    logger = get_logger()

    try:
        return parser.parse(source)
    except (ParseError, RecursionError):
        logger.debug("Parsing aborted")
        raise
    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse_with_predicates(source: str) -> ParseResult:
    """Parse a formula string and report the predicate symbols encountered.

    Uses a fresh parser instance for each invocation, so the recorded
    predicates belong to this input only and concurrent callers never share
    parser state.

    Args:
        source: Formula string in LaTeX-style or Unicode notation

    Returns:
        ParseResult with the formula tree and its predicate symbols

    Raises:
        ParseError: Formula syntax is malformed, or the input is a Horn clause
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = _FOLParser()
    result = _run_parser(parser, source)

    if not isinstance(result, Formula):
        raise ParseError(
            "Expected a formula but found a clause in Horn notation",
            position=0,
            expected="formula",
        )

    logger.debug(
        f"Formula parsed successfully into AST with type: {type(result).__name__}"
    )
    return ParseResult(result, tuple(parser.predicates))


def parse(source: str) -> Formula:
    """Parse a formula string into its Abstract Syntax Tree.

    Args:
        source: Formula string in LaTeX-style or Unicode notation

    Returns:
        Root AST node representing the parsed formula structure

    Raises:
        ParseError: Formula syntax is malformed or contains unsupported constructs

    Example:
        >>> parse("P \\\\land Q")
        And(left=Atom(name='P', args=()), right=Atom(name='Q', args=()))
    """
    return parse_with_predicates(source).formula


def parse_horn(source: str) -> HornClause:
    """Parse a clause written in Horn notation (``A :- B, C.``).

    Args:
        source: Fact, rule or goal text as produced by the Horn classifier

    Returns:
        The corresponding HornClause

    Raises:
        ParseError: The text is malformed or is a plain formula
    """
    logger = get_logger()
    logger.debug(f"Parsing Horn clause: {source}")

    result = _run_parser(_FOLParser(), source)
    if not isinstance(result, HornClause):
        raise ParseError(
            "Expected a clause in Horn notation but found a formula",
            position=len(source),
            expected="'.' or ':-'",
        )
    return result


__all__ = [
    "parse",
    "parse_with_predicates",
    "parse_horn",
    "ParseResult",
    "ParseError",
    "ErrorKind",
]

__version__ = "1.0.0"
__description__ = "First-order formula parsing components"
