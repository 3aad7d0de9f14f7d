# parser/grammar.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# LALR(1) grammar and parser for first-order formulas using SLY

"""First-order formula grammar implementation using SLY parser generator.

This module defines the grammar rules and parsing logic for first-order logic
formulas in LaTeX-style notation. The parser constructs Abstract Syntax Trees
from token streams provided by the lexer, handling operator precedence and
associativity correctly.

Grammar Features:
- Boolean connectives (¬, ∧, ∨, →, ↔) with conventional precedence
- Quantifiers binding the immediately following unary subformula
- Predicate applications over variables and function terms
- Horn clause notation (``A :- B, C.``) for reading back Horn output
- Error reporting with character position and expected input

Operator Precedence (lowest to highest):
- IFF ('↔'): right-associative
- IMPLIES ('→'): right-associative
- OR ('∨'): left-associative
- AND ('∧'): left-associative
- NOT ('¬'), FORALL, EXISTS: right-associative, bind tightest
"""

from typing import Dict, List, Optional, Tuple
from sly import Parser
from .lexer import FOLLexer
from .ast_nodes import (
    Formula,
    Atom,
    Not,
    And,
    Or,
    Implies,
    Iff,
    ForAll,
    Exists,
    Variable,
    FunctionApplication,
    HornClause,
    HornKind,
)
from .exceptions import ParseError
from utils.logger import get_logger

_OPERAND_EXPECTED = {"NOT", "AND", "OR", "IMPLIES", "IFF", "LPAREN"}


class _FOLParser(Parser):
    """SLY-based LALR(1) parser for first-order formulas.

    Implements grammar rules to construct AST nodes from token streams and
    records every distinct predicate symbol encountered. A fresh instance is
    used per parse, so the recorded symbols belong to a single input.

    Attributes:
        tokens: Token types from FOLLexer
        precedence: Operator precedence and associativity rules
        predicates: ``(name, arity)`` pairs in order of first appearance
    """

    tokens = FOLLexer.tokens

    precedence = (
        ("right", "IFF"),
        ("right", "IMPLIES"),
        ("left", "OR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    @_("expr")
    def start(self, p):
        """Start rule: a complete formula."""
        return p.expr

    @_("horn_clause")
    def start(self, p):
        """Start rule: a clause in Horn notation."""
        return p.horn_clause

    # Formula grammar rules
    @_("expr IFF expr")
    def expr(self, p) -> Formula:
        """Biconditional."""
        return Iff(p.expr0, p.expr1)

    @_("expr IMPLIES expr")
    def expr(self, p) -> Formula:
        """Implication."""
        return Implies(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Formula:
        """Disjunction."""
        return Or(p.expr0, p.expr1)

    @_("expr AND expr")
    def expr(self, p) -> Formula:
        """Conjunction."""
        return And(p.expr0, p.expr1)

    @_("NOT expr")
    def expr(self, p) -> Formula:
        """Negation."""
        return Not(p.expr)

    @_("FORALL ID expr %prec NOT")
    def expr(self, p) -> Formula:
        """Universal quantifier over the following unary subformula."""
        return ForAll(p.ID, p.expr)

    @_("EXISTS ID expr %prec NOT")
    def expr(self, p) -> Formula:
        """Existential quantifier over the following unary subformula."""
        return Exists(p.ID, p.expr)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Formula:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("atom")
    def expr(self, p) -> Formula:
        """Expression can be a single atom."""
        return p.atom

    # Atom and term grammar rules
    @_("ID")
    def atom(self, p) -> Atom:
        """Propositional atom."""
        return self._record(Atom(p.ID))

    @_("ID LPAREN terms RPAREN")
    def atom(self, p) -> Atom:
        """Predicate application."""
        return self._record(Atom(p.ID, tuple(p.terms)))

    @_("term")
    def terms(self, p) -> list:
        return [p.term]

    @_("terms COMMA term")
    def terms(self, p) -> list:
        return p.terms + [p.term]

    @_("ID")
    def term(self, p):
        """Variable or free constant."""
        return Variable(p.ID)

    @_("ID LPAREN terms RPAREN")
    def term(self, p):
        """Function application."""
        return FunctionApplication(p.ID, tuple(p.terms))

    # Horn clause grammar rules
    @_("atom PERIOD")
    def horn_clause(self, p) -> HornClause:
        """Fact: ``A.``"""
        return HornClause(HornKind.FACT, p.atom)

    @_("atom NECK atoms PERIOD")
    def horn_clause(self, p) -> HornClause:
        """Rule: ``A :- B, C.``"""
        return HornClause(HornKind.RULE, p.atom, tuple(p.atoms))

    @_("NECK atoms PERIOD")
    def horn_clause(self, p) -> HornClause:
        """Goal: ``:- A, B.``"""
        return HornClause(HornKind.GOAL, None, tuple(p.atoms))

    @_("NECK PERIOD")
    def horn_clause(self, p) -> HornClause:
        """Empty goal, the empty clause."""
        return HornClause(HornKind.GOAL)

    @_("atom")
    def atoms(self, p) -> list:
        return [p.atom]

    @_("atoms COMMA atom")
    def atoms(self, p) -> list:
        return p.atoms + [p.atom]

    def _record(self, atom: Atom) -> Atom:
        self.predicates.setdefault((atom.name, atom.arity), None)
        return atom

    def parse(self, text: str):
        """Parse formula text into an AST.

        Tokenizes the input text and constructs an Abstract Syntax Tree
        representing the formula structure (or a ``HornClause`` for input in
        Horn notation). Empty input is rejected before tokenization.

        Args:
            text: Formula string to parse

        Returns:
            Root AST node representing the parsed formula

        Raises:
            ParseError: If the formula is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        if not text.strip():
            raise ParseError("Input formula is empty.", position=0, expected="formula")

        self._text = text
        self._tokens: List = []
        self.predicates: Dict[Tuple[str, int], None] = {}

        try:
            self._tokens = list(FOLLexer().tokenize(text))
            ast_result = super().parse(iter(self._tokens))

            if ast_result is None:
                raise ParseError(
                    "Failed to parse formula (syntax error).", position=len(text)
                )

            logger.debug(
                f"Successfully parsed formula into {type(ast_result).__name__}"
            )
            return ast_result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Called automatically by SLY when encountering tokens that don't match
        any grammar rule. Reports the offending position and what the grammar
        would have accepted after the preceding token.

        Args:
            token: Problematic token or None for end-of-input errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token is None:
            position = len(self._text)
            previous = self._tokens[-1] if self._tokens else None
            expected = self._expected_after(len(self._tokens))
            error_msg = (
                f"Syntax error: Unexpected end of formula at position {position}"
                f" (expected {expected})"
            )
            if previous is not None:
                error_msg += f" after '{previous.value}'"
        else:
            position = token.index
            expected = self._expected_after(self._index_of(token))
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {position} (expected {expected})"
            )

        raise ParseError(error_msg, position=position, expected=expected)

    def _index_of(self, token) -> int:
        for i, candidate in enumerate(self._tokens):
            if candidate is token:
                return i
        return len(self._tokens)

    def _expected_after(self, index: int) -> str:
        """Describe what may follow the tokens before ``index``."""
        seen = self._tokens[:index]
        previous: Optional[str] = seen[-1].type if seen else None
        before: Optional[str] = seen[-2].type if len(seen) > 1 else None
        depth = sum(
            1 if t.type == "LPAREN" else -1 if t.type == "RPAREN" else 0 for t in seen
        )

        if previous is None or previous in _OPERAND_EXPECTED:
            return "formula"
        if previous in ("FORALL", "EXISTS"):
            return "variable"
        if previous == "ID" and before in ("FORALL", "EXISTS"):
            return "formula"
        if previous == "NECK":
            return "atom or '.'"
        if previous == "COMMA":
            return "term"
        if previous == "PERIOD":
            return "end of input"
        if depth > 0:
            return "connective or ')'"
        return "connective or end of input"
