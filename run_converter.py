#!/usr/bin/env python3
# run_converter.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Command-line interface for normal form conversion with configurable logging levels

import sys
import json
import argparse
from pathlib import Path
from typing import List, Optional

from core import ConversionConfig, ConversionError, ConversionResult, FormulaConverter
from core.config import DEFAULT_MAX_NODES, DEFAULT_TIME_LIMIT
from core.result import (
    PCNF_LABEL,
    PDNF_LABEL,
    SKOLEM_LABEL,
    CLAUSAL_LABEL,
    HORN_LABEL,
)
from parser.ast_nodes import Notation
from utils.examples import EXAMPLE_FORMULAS
from utils.logger import configure_logging, get_logger


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula text with surrounding whitespace removed

    Raises:
        FileNotFoundError: If the formula file doesn't exist
        ValueError: If the formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    if not content:
        raise ValueError("Formula file is empty")

    return content


def build_config(args: argparse.Namespace) -> ConversionConfig:
    """Map command line flags onto a ConversionConfig.

    Raises:
        ValueError: A limit is not positive
    """
    notation = Notation.LATEX if args.latex else Notation.UNICODE
    if args.no_limit:
        return ConversionConfig.unlimited(notation)
    return ConversionConfig(
        max_nodes=args.max_nodes, time_limit=args.time_limit, notation=notation
    )


def print_result(result: ConversionResult, verbose: bool) -> None:
    """Print every section of a conversion result.

    Args:
        result: Completed conversion
        verbose: Include the header and the intermediate step trace
    """
    logger = get_logger()

    if verbose:
        logger.conversion_start(result.source, result.formula_type)
        for label, text in result.step_pairs():
            logger.result_section(label, text)

    logger.result_section(PCNF_LABEL, result.pcnf.render(result.notation))
    logger.result_section(PDNF_LABEL, result.pdnf.render(result.notation))
    logger.result_section(SKOLEM_LABEL, result.skolem_form.render(result.notation))
    logger.result_section(CLAUSAL_LABEL, result.clausal_form())
    logger.result_section(HORN_LABEL, result.horn_summary())


def print_examples() -> None:
    """List the bundled example formulas."""
    logger = get_logger()

    logger.info("Example formulas:")
    for index, formula in enumerate(EXAMPLE_FORMULAS, start=1):
        logger.info(f"  {index}. {formula}")


def convert_all(
    converter: FormulaConverter, formulas: List[str], as_json: bool, verbose: bool
) -> int:
    """Convert each formula and print its result.

    Returns:
        0 when every conversion succeeded, 1 otherwise
    """
    logger = get_logger()
    exit_code = 0
    documents = []

    for formula in formulas:
        try:
            result = converter.convert(formula)
        except ConversionError as e:
            logger.error(f"Conversion error for {formula!r}: {e}")
            if not e.recoverable:
                logger.error("This is an internal error; please report the formula")
            exit_code = 1
            continue

        if as_json:
            documents.append(result.to_dict())
        else:
            if len(formulas) > 1:
                logger.info(f"\n=== {formula} ===")
            print_result(result, verbose)

    if as_json:
        payload = documents[0] if len(formulas) == 1 and documents else documents
        logger.info(json.dumps(payload, ensure_ascii=False, indent=2))

    return exit_code


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Clausa First-Order Logic Normal Form Converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_converter.py "P \\rightarrow Q"
  python run_converter.py "\\forall x (P(x) \\rightarrow Q(x))" -v
  python run_converter.py -f formula.tex --latex
  python run_converter.py --all-examples --json

Formula syntax:
  Connectives: \\neg \\land \\lor \\rightarrow \\leftrightarrow (or ¬ ∧ ∨ → ↔)
  Quantifiers: \\forall x, \\exists y (or ∀x, ∃y)
  Atoms:       P, Q(x), R(x, f(y))
        """,
    )

    parser.add_argument("formula", nargs="?", help="Formula to convert")

    parser.add_argument(
        "-f", "--formula-file", type=Path, help="Read the formula from a file"
    )

    parser.add_argument(
        "--examples", action="store_true", help="List the bundled example formulas"
    )

    parser.add_argument(
        "--all-examples",
        action="store_true",
        help="Convert every bundled example formula",
    )

    parser.add_argument(
        "--latex", action="store_true", help="Render results in LaTeX notation"
    )

    parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    parser.add_argument(
        "--max-nodes",
        type=int,
        default=DEFAULT_MAX_NODES,
        help="Largest formula size any stage may produce (default: %(default)s)",
    )

    parser.add_argument(
        "--time-limit",
        type=float,
        default=DEFAULT_TIME_LIMIT,
        help="Wall-clock seconds per formula (default: %(default)s)",
    )

    parser.add_argument(
        "--no-limit", action="store_true", help="Disable node and time limits"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Print the intermediate steps"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the normal form converter.

    Args:
        argv: Command line arguments, defaults to ``sys.argv[1:]``

    Returns:
        Exit code (0 for success, 1 for conversion errors, 2 for usage errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    # Results are printed at INFO level
    configure_logging(verbose=True, debug=args.debug)
    logger = get_logger()

    if args.examples:
        print_examples()
        return 0

    try:
        config = build_config(args)

        if args.all_examples:
            formulas = list(EXAMPLE_FORMULAS)
        elif args.formula_file is not None:
            formulas = [read_formula_file(args.formula_file)]
        elif args.formula is not None:
            formulas = [args.formula]
        else:
            logger.error("No formula given; pass a formula, -f FILE or --all-examples")
            return 2

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Input error: {e}")
        return 2

    converter = FormulaConverter(config)

    try:
        return convert_all(
            converter, formulas, as_json=args.json, verbose=args.verbose or args.debug
        )
    except KeyboardInterrupt:
        logger.error("Conversion interrupted by user")
        return 2


if __name__ == "__main__":
    sys.exit(main())
