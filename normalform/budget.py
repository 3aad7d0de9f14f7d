# normalform/budget.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Per-request node-count and wall-clock budget

"""Resource budget for a single conversion request.

CNF and DNF conversion can grow exponentially with the size of the input.
A ``ResourceBudget`` is created for every request and checked between stages
and after every distribution pass; once the formula grows past ``max_nodes``
or the request runs longer than ``time_limit`` seconds the conversion is
aborted with ``ResourceExceededError``.
"""

import time
from typing import Optional

from parser.ast_nodes import Formula
from .exceptions import ResourceExceededError
from utils.logger import get_logger


class ResourceBudget:
    """Node-count and elapsed-time limits for one conversion.

    Attributes:
        max_nodes: Largest permitted formula size, None for no limit
        time_limit: Permitted wall-clock seconds, None for no limit
    """

    def __init__(self, max_nodes: Optional[int] = None, time_limit: Optional[float] = None):
        self.max_nodes = max_nodes
        self.time_limit = time_limit
        self._started = time.monotonic()

    @classmethod
    def unlimited(cls) -> "ResourceBudget":
        return cls(None, None)

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self._started

    def check(self, formula: Formula, stage: str) -> None:
        """Verify that ``formula`` and the elapsed time are within budget.

        Args:
            formula: Formula produced by the stage
            stage: Stage name used in diagnostics

        Raises:
            ResourceExceededError: A limit has been exceeded
        """
        elapsed = self.elapsed
        if self.time_limit is not None and elapsed > self.time_limit:
            raise ResourceExceededError(
                f"Time limit of {self.time_limit}s exceeded during {stage} "
                f"({elapsed:.2f}s elapsed)",
                limit=self.time_limit,
                observed=elapsed,
            )

        if self.max_nodes is None:
            return

        nodes = formula.size()
        get_logger().budget_check(stage, nodes, elapsed)
        if nodes > self.max_nodes:
            raise ResourceExceededError(
                f"Formula grew to {nodes} nodes during {stage}, "
                f"exceeding the limit of {self.max_nodes}",
                limit=self.max_nodes,
                observed=nodes,
            )
