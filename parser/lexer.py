# parser/lexer.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Lexical analyzer for first-order formula tokenization using SLY

"""Lexical analyzer for first-order formula strings.

This module implements tokenization of formulas written in LaTeX-style logic
notation, breaking input strings into tokens for parser consumption. LaTeX
commands and their Unicode symbols map to the same token types, so text that
mixes both needs no pre-substitution pass.

Supported Tokens:
- Quantifiers: \\forall ∀, \\exists ∃
- Connectives: \\neg \\lnot ¬, \\land \\wedge ∧, \\lor \\vee ∨,
  \\rightarrow \\to →, \\leftrightarrow \\iff ↔
- Punctuation: ( ) ,
- Horn notation: :- and .
- Identifiers: predicate, function and variable names
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from .exceptions import ParseError
from utils.logger import get_logger

# A LaTeX command ends where the next character cannot continue its name
_END = r"(?![A-Za-z0-9_])"


class FOLLexer(Lexer):
    """SLY-based lexer for first-order formula tokenization.

    Transforms input formula strings into token sequences for parsing. Token
    positions (``token.index``) are offsets into the original text.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    # Valid token types for parser recognition
    tokens = {
        "FORALL",
        "EXISTS",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "IFF",
        "LPAREN",
        "RPAREN",
        "COMMA",
        "NECK",
        "PERIOD",
        "ID",
    }

    # Whitespace characters to ignore
    ignore = " \t\r\n"

    # Quantifiers
    FORALL = r"\\forall" + _END + r"|∀"
    EXISTS = r"\\exists" + _END + r"|∃"

    # Connectives; \leftrightarrow must be tried before \lor and \land
    IFF = r"\\leftrightarrow" + _END + r"|\\iff" + _END + r"|↔"
    IMPLIES = r"\\rightarrow" + _END + r"|\\to" + _END + r"|→"
    NOT = r"\\neg" + _END + r"|\\lnot" + _END + r"|¬"
    AND = r"\\land" + _END + r"|\\wedge" + _END + r"|∧"
    OR = r"\\lor" + _END + r"|\\vee" + _END + r"|∨"

    # Punctuation
    LPAREN = r"\("
    RPAREN = r"\)"
    COMMA = r","
    NECK = r":-"
    PERIOD = r"\."

    # Identifier pattern: starts with letter/underscore, followed by alphanumerics/underscores
    ID = r"[A-Za-z_][A-Za-z0-9_]*"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Called automatically when encountering characters that don't match
        any defined token pattern, including unknown LaTeX commands.

        Args:
            t: SLY token object containing error context

        Raises:
            ParseError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        # Skip the illegal character
        self.index += 1

        raise ParseError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}",
            position=error_pos,
            expected="connective, quantifier, parenthesis or identifier",
        )
