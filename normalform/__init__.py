# normalform/__init__.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Normalization stages from parsed formula to Horn clauses

"""Semantics-preserving rewrites from an arbitrary formula to clausal form.

Each stage consumes the immutable tree produced by the previous one and
returns a new tree; no stage mutates its input or keeps state between calls
beyond the counters owned by its own instance.

Stages:
    eliminate: Removes → and ↔
    to_nnf: Pushes negation to the atoms
    rename: Gives every quantifier a unique variable name
    to_prenex: Lifts all quantifiers into a prefix
    to_cnf / to_dnf: Distributes the matrix into CNF or DNF
    Clausifier: Skolemizes and splits CNF into clauses
    classify: Partitions clauses into Horn and non-Horn
"""

from .exceptions import (
    NormalFormError,
    ClausificationError,
    InvalidHornClauseError,
    ResourceExceededError,
)
from .budget import ResourceBudget
from .eliminator import ConnectiveEliminator, eliminate
from .nnf import NNFTransformer, to_nnf
from .renamer import AlphaRenamer, rename, free_variables, bound_variables
from .prenex import Prenex, PrenexTransformer, Quantifier, QuantifierBinding, to_prenex
from .matrix import to_cnf, to_dnf, conjuncts, disjuncts, is_cnf, is_dnf
from .clausifier import Clausifier, ClauseSet, render_clause_set
from .horn import HornPartition, classify, format_horn

__all__ = [
    "NormalFormError",
    "ClausificationError",
    "InvalidHornClauseError",
    "ResourceExceededError",
    "ResourceBudget",
    "ConnectiveEliminator",
    "eliminate",
    "NNFTransformer",
    "to_nnf",
    "AlphaRenamer",
    "rename",
    "free_variables",
    "bound_variables",
    "Prenex",
    "PrenexTransformer",
    "Quantifier",
    "QuantifierBinding",
    "to_prenex",
    "to_cnf",
    "to_dnf",
    "conjuncts",
    "disjuncts",
    "is_cnf",
    "is_dnf",
    "Clausifier",
    "ClauseSet",
    "render_clause_set",
    "HornPartition",
    "classify",
    "format_horn",
]
