# core/result.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Conversion result and step trace handed to the presentation layer

"""Values returned by a successful conversion.

A ``ConversionResult`` keeps the trees produced by each stage and renders them
on demand in the notation chosen for the request. ``rendering_pairs`` flattens
everything into ``(label, text)`` pairs for display.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from parser.ast_nodes import Clause, Formula, HornClause, Notation
from normalform.clausifier import render_clause_set
from normalform.horn import HornPartition
from normalform.prenex import Prenex

ELIMINATION_LABEL = "Elimination of Implications/Biconditionals"
NNF_LABEL = "Negation Normal Form"
RENAMING_LABEL = "Bound Variable Renaming"
PRENEX_LABEL = "Prenex Form"
PCNF_LABEL = "Prenex Conjunctive Normal Form (PCNF)"
PDNF_LABEL = "Prenex Disjunctive Normal Form (PDNF)"
SKOLEM_LABEL = "Skolem Normal Form"
CLAUSAL_LABEL = "Clausal Form"
HORN_LABEL = "Horn Clauses"


@dataclass(frozen=True)
class Step:
    """One labelled intermediate formula of the pipeline.

    Attributes:
        label: Stage name shown to the user
        formula: Formula produced by the stage
    """

    label: str
    formula: Formula

    def render(self, notation: Notation = Notation.UNICODE) -> Tuple[str, str]:
        return self.label, self.formula.render(notation)


StepTrace = Tuple[Step, ...]


@dataclass(frozen=True)
class ConversionResult:
    """Everything produced for one input formula.

    Attributes:
        source: Input text as given
        formula: Parsed formula
        formula_type: "first-order" or "propositional"
        predicates: Distinct ``(name, arity)`` predicate symbols of the input
        steps: Trace of elimination, NNF, renaming and prenex stages
        prenex: Prenex form of the renamed NNF
        pcnf: Prenex form with the matrix in CNF
        pdnf: Prenex form with the matrix in DNF
        skolem_form: Universal prefix over the Skolemized CNF matrix
        clauses: Clauses of the Skolemized PCNF
        horn: Horn clauses in logic-programming form
        non_horn: Clauses with more than one positive literal
        notation: Symbol set used when rendering
    """

    source: str
    formula: Formula
    formula_type: str
    predicates: Tuple[Tuple[str, int], ...]
    steps: StepTrace
    prenex: Prenex
    pcnf: Prenex
    pdnf: Prenex
    skolem_form: Prenex
    clauses: Tuple[Clause, ...]
    horn: Tuple[HornClause, ...]
    non_horn: Tuple[Clause, ...]
    notation: Notation = Notation.UNICODE

    def step_pairs(self) -> List[Tuple[str, str]]:
        """The step trace as ``(label, formula text)`` pairs."""
        return [step.render(self.notation) for step in self.steps]

    def clausal_form(self) -> str:
        """All clauses rendered as ``{ C1, C2 }``."""
        return render_clause_set(self.clauses, self.notation)

    def horn_summary(self) -> str:
        """Horn and non-Horn clauses rendered as text blocks."""
        return HornPartition(self.horn, self.non_horn).summary()

    def rendering_pairs(self) -> List[Tuple[str, str]]:
        """Every displayable result as ``(label, text)`` pairs, in pipeline order."""
        pairs = self.step_pairs()
        pairs.extend(
            [
                (PCNF_LABEL, self.pcnf.render(self.notation)),
                (PDNF_LABEL, self.pdnf.render(self.notation)),
                (SKOLEM_LABEL, self.skolem_form.render(self.notation)),
                (CLAUSAL_LABEL, self.clausal_form()),
                (HORN_LABEL, self.horn_summary()),
            ]
        )
        return pairs

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable view of the result."""
        return {
            "source": self.source,
            "formula": self.formula.render(self.notation),
            "formula_type": self.formula_type,
            "predicates": [
                {"name": name, "arity": arity} for name, arity in self.predicates
            ],
            "steps": [
                {"label": label, "formula": text} for label, text in self.step_pairs()
            ],
            "pcnf": self.pcnf.render(self.notation),
            "pdnf": self.pdnf.render(self.notation),
            "skolem_form": self.skolem_form.render(self.notation),
            "clauses": [clause.render(self.notation) for clause in self.clauses],
            "horn": [
                {"kind": str(clause.kind), "text": str(clause)} for clause in self.horn
            ],
            "non_horn": [clause.render(self.notation) for clause in self.non_horn],
        }
