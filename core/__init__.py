# core/__init__.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Core module public API for the conversion pipeline

"""Orchestration of the formula normalization pipeline.

This module ties the parser and the normalization stages together behind a
single call. A request takes formula text in LaTeX-style or Unicode notation
and produces the full trace of intermediate forms together with the prenex
CNF and DNF, the Skolem normal form, the clause set and its Horn partition.

Primary Components:
    FormulaConverter: Runs the pipeline under a ConversionConfig
    ConversionConfig: Resource limits, output notation and Skolem prefix
    ConversionResult: Every normal form produced for one input
    Step: Labelled intermediate formula of the trace
    ConversionError: The single error type raised by a failed request

Example:
    >>> from core import FormulaConverter
    >>> result = FormulaConverter().convert("P \\\\rightarrow Q")
    >>> result.clausal_form()
    '{ ¬P ∨ Q }'
"""

from .config import ConversionConfig, DEFAULT_MAX_NODES, DEFAULT_TIME_LIMIT
from .converter import FormulaConverter, convert_formula, formula_type
from .exceptions import ConversionError
from .result import ConversionResult, Step

__all__ = [
    "FormulaConverter",
    "convert_formula",
    "formula_type",
    "ConversionConfig",
    "DEFAULT_MAX_NODES",
    "DEFAULT_TIME_LIMIT",
    "ConversionResult",
    "Step",
    "ConversionError",
]

__version__ = "1.0.0"
__description__ = "Conversion pipeline from formula text to clausal form"
