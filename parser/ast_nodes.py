# parser/ast_nodes.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Abstract Syntax Tree node classes for first-order formula representation

"""AST node classes for representing parsed first-order formulas.

This module defines the immutable and hashable node classes used to build tree
representations of first-order (and propositional) logic formulas, together
with the clausal values derived from them by the normalization pipeline.

Node Types:
    Atom: Predicate application (propositional atoms have no arguments)
    Not, And, Or, Implies, Iff: Boolean connectives
    ForAll, Exists: Quantifiers binding a single variable

Term Types:
    Variable: Individual variable or free constant
    FunctionApplication: Function symbol applied to terms (Skolem terms)

Clausal Values:
    Literal: Atom with a polarity
    Clause: Duplicate-free disjunction of literals with set equality
    HornClause: Fact, rule or goal rendering of a Horn clause

Formula nodes support the visitor design pattern for traversal and
transformation, and render themselves in Unicode or LaTeX notation with the
minimum number of parentheses needed to parse back to the same tree.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Iterator, Optional, Protocol, Tuple


class Notation(Enum):
    """Symbol sets available for rendering formulas."""

    UNICODE = "unicode"
    LATEX = "latex"


_SYMBOLS = {
    Notation.UNICODE: {
        "not": "¬",
        "and": " ∧ ",
        "or": " ∨ ",
        "implies": " → ",
        "iff": " ↔ ",
        "forall": "∀",
        "exists": "∃",
    },
    Notation.LATEX: {
        "not": "\\neg ",
        "and": " \\land ",
        "or": " \\lor ",
        "implies": " \\rightarrow ",
        "iff": " \\leftrightarrow ",
        "forall": "\\forall ",
        "exists": "\\exists ",
    },
}

# Binding strength, lowest first
_IFF = 1
_IMPLIES = 2
_OR = 3
_AND = 4
_UNARY = 5

EMPTY_CLAUSE_SYMBOL = "□"


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each formula node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_atom(self, n: Atom): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_implies(self, n: Implies): ...

    def visit_iff(self, n: Iff): ...

    def visit_forall(self, n: ForAll): ...

    def visit_exists(self, n: Exists): ...


# ---------------------------------------------------------------------------
# Terms
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Term:
    """Base class for terms occurring as predicate or function arguments.

    Attributes:
        name: Variable or function symbol name
    """

    name: str

    def substitute(self, mapping: Dict[str, Term]) -> Term:
        """Replace variables named in ``mapping`` by the mapped terms."""
        raise NotImplementedError

    def variable_names(self) -> Iterator[str]:
        """Yield the names of all variables occurring in the term."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Variable(Term):
    """Individual variable, or a free constant when no quantifier binds it."""

    def substitute(self, mapping: Dict[str, Term]) -> Term:
        return mapping.get(self.name, self)

    def variable_names(self) -> Iterator[str]:
        yield self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class FunctionApplication(Term):
    """Function symbol applied to an ordered sequence of argument terms.

    A function application without arguments is a constant; Skolemization
    produces these for existential variables not preceded by any universal.

    Attributes:
        args: Argument terms in order
    """

    args: Tuple[Term, ...] = ()

    def substitute(self, mapping: Dict[str, Term]) -> Term:
        return FunctionApplication(
            self.name, tuple(arg.substitute(mapping) for arg in self.args)
        )

    def variable_names(self) -> Iterator[str]:
        for arg in self.args:
            yield from arg.variable_names()

    def __str__(self) -> str:
        if not self.args:
            return self.name
        return f"{self.name}({', '.join(str(arg) for arg in self.args)})"


# ---------------------------------------------------------------------------
# Formulas
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Formula:
    """Base class for all formula nodes.

    Provides the foundation for immutable formula trees with visitor pattern
    support. Concrete node types implement ``accept`` for visitor dispatch,
    ``render`` for their textual form and ``children`` for traversal.
    """

    precedence: ClassVar[int] = _UNARY

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def render(self, notation: Notation = Notation.UNICODE) -> str:
        """Return the formula as text in the requested notation.

        Args:
            notation: Symbol set to use for connectives and quantifiers

        Returns:
            Formula text that parses back to an equal tree
        """
        rendered: Dict[int, str] = {}
        stack = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                parts = tuple(rendered[id(child)] for child in node.children())
                rendered[id(node)] = node._join(notation, parts)
            elif id(node) not in rendered:
                stack.append((node, True))
                stack.extend((child, False) for child in node.children())
        return rendered[id(self)]

    def _join(self, notation: Notation, parts: Tuple[str, ...]) -> str:
        """Return this node as text given the rendered text of its children."""
        raise NotImplementedError

    def children(self) -> Tuple[Formula, ...]:
        """Return the immediate subformulas, left to right."""
        return ()

    def size(self) -> int:
        """Return the number of formula nodes in this tree."""
        count = 0
        stack = [self]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children())
        return count

    def depth(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        deepest = 0
        stack = [(self, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.children())
        return deepest

    def __str__(self) -> str:
        return self.render()


def _wrap(text: str, needed: bool) -> str:
    return f"({text})" if needed else text


@dataclass(frozen=True, slots=True)
class Atom(Formula):
    """Predicate application, the leaf of every formula tree.

    Propositional atoms are predicates of arity zero and render without an
    argument list.

    Attributes:
        name: Predicate identifier
        args: Argument terms in order
    """

    name: str
    args: Tuple[Term, ...] = ()

    @property
    def arity(self) -> int:
        return len(self.args)

    def accept(self, v: Visitor):
        return v.visit_atom(self)

    def substitute(self, mapping: Dict[str, Term]) -> Atom:
        """Return the atom with variables replaced according to ``mapping``."""
        if not mapping or not self.args:
            return self
        return Atom(self.name, tuple(arg.substitute(mapping) for arg in self.args))

    def variable_names(self) -> Iterator[str]:
        for arg in self.args:
            yield from arg.variable_names()

    def _join(self, notation: Notation, parts: Tuple[str, ...]) -> str:
        if not self.args:
            return self.name
        return f"{self.name}({', '.join(str(arg) for arg in self.args)})"


@dataclass(frozen=True, slots=True)
class Not(Formula):
    """Logical negation of a formula.

    Attributes:
        operand: The formula being negated
    """

    operand: Formula

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def _join(self, notation: Notation, parts: Tuple[str, ...]) -> str:
        operand = _wrap(parts[0], self.operand.precedence < _UNARY)
        return f"{_SYMBOLS[notation]['not']}{operand}"

    def children(self) -> Tuple[Formula, ...]:
        return (self.operand,)


@dataclass(frozen=True, slots=True)
class BinaryFormula(Formula):
    """Common structure of the binary connectives.

    Left-associative connectives parenthesize an equal-precedence right
    operand, right-associative ones an equal-precedence left operand.

    Attributes:
        left: Left operand
        right: Right operand
    """

    left: Formula
    right: Formula

    symbol: ClassVar[str] = ""
    right_associative: ClassVar[bool] = False

    def _join(self, notation: Notation, parts: Tuple[str, ...]) -> str:
        level = self.precedence
        left = _wrap(
            parts[0],
            self.left.precedence < level
            or (self.left.precedence == level and self.right_associative),
        )
        right = _wrap(
            parts[1],
            self.right.precedence < level
            or (self.right.precedence == level and not self.right_associative),
        )
        return f"{left}{_SYMBOLS[notation][self.symbol]}{right}"

    def children(self) -> Tuple[Formula, ...]:
        return (self.left, self.right)


@dataclass(frozen=True, slots=True)
class And(BinaryFormula):
    """Logical conjunction, left-associative."""

    precedence: ClassVar[int] = _AND
    symbol: ClassVar[str] = "and"

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(BinaryFormula):
    """Logical disjunction, left-associative."""

    precedence: ClassVar[int] = _OR
    symbol: ClassVar[str] = "or"

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class Implies(BinaryFormula):
    """Material implication, right-associative: ``A → B → C`` is ``A → (B → C)``."""

    precedence: ClassVar[int] = _IMPLIES
    symbol: ClassVar[str] = "implies"
    right_associative: ClassVar[bool] = True

    def accept(self, v: Visitor):
        return v.visit_implies(self)


@dataclass(frozen=True, slots=True)
class Iff(BinaryFormula):
    """Biconditional, right-associative."""

    precedence: ClassVar[int] = _IFF
    symbol: ClassVar[str] = "iff"
    right_associative: ClassVar[bool] = True

    def accept(self, v: Visitor):
        return v.visit_iff(self)


@dataclass(frozen=True, slots=True)
class QuantifiedFormula(Formula):
    """Common structure of the quantifiers.

    A quantifier binds as tightly as negation, so a body that is itself a
    binary formula is parenthesized when rendered.

    Attributes:
        variable: Name of the bound variable
        body: Scope of the quantifier
    """

    variable: str
    body: Formula

    symbol: ClassVar[str] = ""

    def _join(self, notation: Notation, parts: Tuple[str, ...]) -> str:
        body = _wrap(parts[0], self.body.precedence < _UNARY)
        return f"{_SYMBOLS[notation][self.symbol]}{self.variable} {body}"

    def children(self) -> Tuple[Formula, ...]:
        return (self.body,)


@dataclass(frozen=True, slots=True)
class ForAll(QuantifiedFormula):
    """Universal quantification."""

    symbol: ClassVar[str] = "forall"

    def accept(self, v: Visitor):
        return v.visit_forall(self)


@dataclass(frozen=True, slots=True)
class Exists(QuantifiedFormula):
    """Existential quantification."""

    symbol: ClassVar[str] = "exists"

    def accept(self, v: Visitor):
        return v.visit_exists(self)


def is_literal(formula: Formula) -> bool:
    """Return True when ``formula`` is an atom or a negated atom."""
    if isinstance(formula, Not):
        return isinstance(formula.operand, Atom)
    return isinstance(formula, Atom)


# ---------------------------------------------------------------------------
# Clausal values
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Literal:
    """Atom together with its polarity.

    Attributes:
        atom: Underlying predicate application
        positive: False when the atom occurs negated
    """

    atom: Atom
    positive: bool = True

    @classmethod
    def from_formula(cls, formula: Formula) -> Literal:
        """Build a literal from an ``Atom`` or ``Not(Atom)`` formula.

        Raises:
            TypeError: The formula is not a literal
        """
        if isinstance(formula, Atom):
            return cls(formula, True)
        if isinstance(formula, Not) and isinstance(formula.operand, Atom):
            return cls(formula.operand, False)
        raise TypeError(f"Not a literal: {formula}")

    def negate(self) -> Literal:
        return Literal(self.atom, not self.positive)

    def to_formula(self) -> Formula:
        return self.atom if self.positive else Not(self.atom)

    def render(self, notation: Notation = Notation.UNICODE) -> str:
        return self.to_formula().render(notation)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True, slots=True, eq=False)
class Clause:
    """Disjunction of literals with set semantics.

    Duplicate literals collapse on construction; the first occurrence keeps
    its position so rendering is reproducible. Equality and hashing ignore
    literal order.

    Attributes:
        literals: Distinct literals in order of first occurrence
    """

    literals: Tuple[Literal, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "literals", tuple(dict.fromkeys(self.literals)))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Clause):
            return NotImplemented
        return frozenset(self.literals) == frozenset(other.literals)

    def __hash__(self) -> int:
        return hash(frozenset(self.literals))

    def __iter__(self) -> Iterator[Literal]:
        return iter(self.literals)

    def __len__(self) -> int:
        return len(self.literals)

    @property
    def positive_literals(self) -> Tuple[Literal, ...]:
        return tuple(lit for lit in self.literals if lit.positive)

    @property
    def negative_literals(self) -> Tuple[Literal, ...]:
        return tuple(lit for lit in self.literals if not lit.positive)

    def positive_count(self) -> int:
        return sum(1 for lit in self.literals if lit.positive)

    def is_horn(self) -> bool:
        """A clause is Horn when it has at most one positive literal."""
        return self.positive_count() <= 1

    def is_empty(self) -> bool:
        return not self.literals

    def render(self, notation: Notation = Notation.UNICODE) -> str:
        if not self.literals:
            return EMPTY_CLAUSE_SYMBOL
        return _SYMBOLS[notation]["or"].join(
            lit.render(notation) for lit in self.literals
        )

    def __str__(self) -> str:
        return self.render()


class HornKind(Enum):
    """Shape of a Horn clause in logic-programming notation."""

    FACT = "fact"
    RULE = "rule"
    GOAL = "goal"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class HornClause:
    """Horn clause written as a fact, rule or goal.

    Renders as ``A.`` (fact), ``A :- B, C.`` (rule) or ``:- A, B.`` (goal).
    The empty clause is the goal with an empty body, ``:- .``.

    Attributes:
        kind: Fact, rule or goal
        head: The positive atom, None for goals
        body: Atoms of the negative literals in clause order
    """

    kind: HornKind
    head: Optional[Atom] = None
    body: Tuple[Atom, ...] = ()

    def __post_init__(self):
        if self.kind is HornKind.GOAL:
            if self.head is not None:
                raise ValueError(f"A goal has no head, got {self.head}")
        elif self.head is None:
            raise ValueError(f"A {self.kind} needs a head atom")
        elif self.kind is HornKind.FACT and self.body:
            raise ValueError(f"A fact has no body, got {len(self.body)} atoms")
        elif self.kind is HornKind.RULE and not self.body:
            raise ValueError("A rule needs at least one body atom")

    def to_clause(self) -> Clause:
        """Return the clause this Horn clause denotes."""
        literals = [] if self.head is None else [Literal(self.head, True)]
        literals.extend(Literal(atom, False) for atom in self.body)
        return Clause(tuple(literals))

    def __str__(self) -> str:
        body = ", ".join(str(atom) for atom in self.body)
        if self.kind is HornKind.FACT:
            return f"{self.head}."
        if self.kind is HornKind.RULE:
            return f"{self.head} :- {body}."
        return f":- {body}."
