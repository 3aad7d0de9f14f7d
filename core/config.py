# core/config.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Conversion settings: resource limits and output notation

from dataclasses import dataclass
from typing import Optional

from parser.ast_nodes import Notation
from normalform.budget import ResourceBudget

DEFAULT_MAX_NODES = 20_000
DEFAULT_TIME_LIMIT = 10.0


@dataclass(frozen=True)
class ConversionConfig:
    """Settings applied to every request handled by a FormulaConverter.

    Attributes:
        max_nodes: Largest formula size any stage may produce, None for no limit
        time_limit: Wall-clock seconds per request, None for no limit
        notation: Symbol set used for every rendered formula
        skolem_prefix: Name stem of generated Skolem symbols
    """

    max_nodes: Optional[int] = DEFAULT_MAX_NODES
    time_limit: Optional[float] = DEFAULT_TIME_LIMIT
    notation: Notation = Notation.UNICODE
    skolem_prefix: str = "sk"

    def __post_init__(self):
        if self.max_nodes is not None and self.max_nodes <= 0:
            raise ValueError(f"max_nodes must be positive, got {self.max_nodes}")
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {self.time_limit}")
        if not self.skolem_prefix.isidentifier():
            raise ValueError(f"Invalid Skolem prefix: {self.skolem_prefix!r}")

    @classmethod
    def unlimited(cls, notation: Notation = Notation.UNICODE) -> "ConversionConfig":
        """Configuration without node or time limits."""
        return cls(max_nodes=None, time_limit=None, notation=notation)

    def make_budget(self) -> ResourceBudget:
        """Create a fresh budget for one request."""
        return ResourceBudget(self.max_nodes, self.time_limit)
