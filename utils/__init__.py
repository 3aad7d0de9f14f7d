# utils/__init__.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Utility module exports

from .logger import (
    LogLevel,
    get_logger,
    set_log_level,
    configure_logging,
)
from .examples import EXAMPLE_FORMULAS

__all__ = [
    "LogLevel",
    "get_logger",
    "set_log_level",
    "configure_logging",
    "EXAMPLE_FORMULAS",
]
