# utils/logger.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Logging utility for formula conversion with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for formula conversion."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class ConverterLogger:
    """Centralized logger for formula conversion with structured output."""

    def __init__(self, name: str = "clausa", level: LogLevel = LogLevel.INFO):
        """Initialize the converter logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(ConverterFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for conversion events
    def conversion_start(self, source: str, formula_type: Optional[str] = None):
        """Log the start of a conversion request."""
        self.info("=== Starting Conversion ===")
        self.info(f"Formula: {source}")
        if formula_type:
            self.info(f"Type: {formula_type}")

    def step_recorded(self, index: int, label: str, formula: str):
        """Log a pipeline step added to the trace."""
        self.debug(f"    🔧 Step {index} ({label}): {formula}")

    def result_section(self, title: str, body: str):
        """Log one labelled block of the conversion result."""
        self.info(f"\n{title}:")
        for line in body.splitlines() or [""]:
            self.info(f"  {line}")

    def budget_check(self, stage: str, nodes: int, elapsed: float):
        """Log a resource budget check."""
        self.debug(f"      Budget after {stage}: {nodes} nodes, {elapsed:.3f}s")

    def validation_result(self, success: bool, message: str = ""):
        """Log validation results."""
        if success:
            self.debug(f"✅ {message}" if message else "✅ Validation successful")
        else:
            self.error(f"❌ {message}" if message else "❌ Validation failed")


class ConverterFormatter(logging.Formatter):
    """Custom formatter for conversion logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        # For DEBUG level, show with level indicator
        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[ConverterLogger] = None


def get_logger(name: str = "clausa") -> ConverterLogger:
    """Get or create the global converter logger instance.

    Args:
        name: Logger name (default: "clausa")

    Returns:
        ConverterLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = ConverterLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
