# core/converter.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Pipeline orchestrator from formula text to clausal and Horn form

"""Runs the normalization pipeline for one formula at a time.

``FormulaConverter.convert`` is the only entry point the presentation layer
calls. Every request builds its own stage objects, so the renaming and Skolem
counters and the resource budget belong to that request alone and concurrent
conversions never interfere.

Pipeline:
    parse → eliminate → NNF → rename → prenex → PCNF / PDNF
          → Skolemize → clauses → Horn partition

A failure in any stage aborts the whole request with a single
``ConversionError``; no partial result is returned.
"""

import sys
import threading
from collections import Counter
from contextlib import contextmanager
from typing import Iterator, List, Optional

from parser import parse_with_predicates, ParseError
from parser import ast_nodes as ast
from parser.exceptions import ErrorKind
from normalform import (
    NormalFormError,
    ConnectiveEliminator,
    NNFTransformer,
    AlphaRenamer,
    PrenexTransformer,
    Prenex,
    Clausifier,
    classify,
    to_cnf,
    to_dnf,
)
from normalform.prenex import Quantifier
from .config import ConversionConfig
from .exceptions import ConversionError
from .result import (
    ConversionResult,
    Step,
    ELIMINATION_LABEL,
    NNF_LABEL,
    RENAMING_LABEL,
    PRENEX_LABEL,
)
from utils.logger import get_logger

# Interpreter frames a stage may stack per level of formula nesting
_FRAMES_PER_LEVEL = 4

_recursion_lock = threading.Lock()
_recursion_requests: Counter = Counter()
_recursion_baseline = 0


@contextmanager
def recursion_headroom(frames: int) -> Iterator[None]:
    """Raise the interpreter recursion limit by ``frames`` while the block runs.

    Overlapping requests from several threads share one raised limit, sized
    for the largest request still active; the original limit is restored when
    the last one exits.
    """
    global _recursion_baseline

    with _recursion_lock:
        if not _recursion_requests:
            _recursion_baseline = sys.getrecursionlimit()
        _recursion_requests[frames] += 1
        sys.setrecursionlimit(_recursion_baseline + max(_recursion_requests))

    try:
        yield
    finally:
        with _recursion_lock:
            _recursion_requests[frames] -= 1
            if not _recursion_requests[frames]:
                del _recursion_requests[frames]
            extra = max(_recursion_requests) if _recursion_requests else 0
            sys.setrecursionlimit(_recursion_baseline + extra)


def formula_type(formula: ast.Formula) -> str:
    """Return "first-order" when ``formula`` has quantifiers or predicate arguments."""
    stack = [formula]
    while stack:
        node = stack.pop()
        if isinstance(node, ast.QuantifiedFormula):
            return "first-order"
        if isinstance(node, ast.Atom) and node.args:
            return "first-order"
        if isinstance(node, ast.Not):
            stack.append(node.operand)
        elif isinstance(node, ast.BinaryFormula):
            stack.extend((node.left, node.right))
    return "propositional"


class FormulaConverter:
    """Converts formula text into its normal forms.

    Attributes:
        config: Resource limits and notation applied to every request
    """

    def __init__(self, config: Optional[ConversionConfig] = None):
        self.config = config or ConversionConfig()

    def convert(self, text: str) -> ConversionResult:
        """Convert one formula.

        Args:
            text: Formula in LaTeX-style or Unicode notation

        Returns:
            ConversionResult with the step trace and every normal form

        Raises:
            ConversionError: Any stage failed; ``kind`` names the failure
        """
        logger = get_logger()
        logger.debug(f"Converting formula: {text!r}")

        try:
            result = self._run(text)
        except (ParseError, NormalFormError) as exc:
            logger.debug(f"Conversion failed with {exc.kind}: {exc}")
            raise ConversionError.from_exception(exc) from exc
        except RecursionError as exc:
            logger.debug("Conversion exceeded the interpreter recursion limit")
            raise ConversionError(
                ErrorKind.RESOURCE_EXCEEDED, "Formula is nested too deeply to convert"
            ) from exc

        logger.validation_result(True, f"Converted {text!r}: {len(result.clauses)} clauses")
        return result

    def _run(self, text: str) -> ConversionResult:
        logger = get_logger()
        notation = self.config.notation
        budget = self.config.make_budget()
        steps: List[Step] = []

        def record(label: str, formula: ast.Formula) -> ast.Formula:
            steps.append(Step(label, formula))
            logger.step_recorded(len(steps), label, formula.render(notation))
            budget.check(formula, label)
            return formula

        parsed = parse_with_predicates(text)
        budget.check(parsed.formula, "parsing")

        # Every stage below recurses once per nesting level
        with recursion_headroom(_FRAMES_PER_LEVEL * parsed.formula.depth()):
            eliminated = record(
                ELIMINATION_LABEL, ConnectiveEliminator().transform(parsed.formula)
            )
            nnf = record(NNF_LABEL, NNFTransformer().transform(eliminated))
            renamed = record(RENAMING_LABEL, AlphaRenamer().transform(nnf))

            prenex = PrenexTransformer().transform(renamed)
            record(PRENEX_LABEL, prenex.to_formula())

            pcnf = prenex.with_matrix(to_cnf(prenex.matrix, budget))
            pdnf = prenex.with_matrix(to_dnf(prenex.matrix, budget))

            clausifier = Clausifier(self.config.skolem_prefix)
            skolemized, universals = clausifier.skolemize(pcnf.prefix, pcnf.matrix)
            skolem_form = Prenex(
                tuple(b for b in pcnf.prefix if b.kind is Quantifier.FORALL),
                skolemized,
            )
            clauses = clausifier.split(skolemized)
            partition = classify(clauses)

        logger.debug(
            f"Pipeline complete: {len(universals)} universal variables, "
            f"{len(clauses)} clauses"
        )

        return ConversionResult(
            source=text,
            formula=parsed.formula,
            formula_type=formula_type(parsed.formula),
            predicates=parsed.predicates,
            steps=tuple(steps),
            prenex=prenex,
            pcnf=pcnf,
            pdnf=pdnf,
            skolem_form=skolem_form,
            clauses=clauses,
            horn=partition.horn,
            non_horn=partition.non_horn,
            notation=notation,
        )


def convert_formula(text: str, config: Optional[ConversionConfig] = None) -> ConversionResult:
    """Convert ``text`` with a one-off FormulaConverter."""
    return FormulaConverter(config).convert(text)
