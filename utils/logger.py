# utils/logger.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Logging utility for parsing and minimization with configurable levels

import logging
import sys
from enum import Enum
from typing import Iterable, Optional


class LogLevel(Enum):
    """Log levels for the simplifier."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class LogicLogger:
    """Centralized logger with structured output for simplification runs."""

    def __init__(self, name: str = "proplogic", level: LogLevel = LogLevel.INFO):
        """Initialize the logger.

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
        console_handler.setFormatter(LogicFormatter())

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

    # Specialized methods for minimization events
    def merge_round(self, round_number: int, merged: int, primes_found: int):
        """Log the outcome of one Quine-McCluskey merge round."""
        self.debug(
            f"    🔧 Round {round_number}: {merged} merged terms, "
            f"{primes_found} prime implicants so far"
        )

    def prime_implicants(self, patterns: Iterable[str]):
        """Log the full list of prime implicants."""
        self.debug(f"    🔍 Prime implicants: {', '.join(patterns)}")

    def implicant_selected(self, kind: str, pattern: str, covered: Iterable[int]):
        """Log an implicant chosen for the cover."""
        minterms = ", ".join(str(m) for m in sorted(covered))
        self.debug(f"      🟢 {kind} implicant {pattern} covers {{{minterms}}}")

    def expression_header(self, text: str, dialect: Optional[str] = None):
        """Log the start of processing for one expression."""
        self.info(f"=== {text} ===")
        if dialect:
            self.info(f"Dialect: {dialect}")

    def simplified(self, result: str):
        """Log the simplified form of an expression."""
        self.info(f"Simplified: {result}")


class LogicFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        # For DEBUG level, show with level indicator
        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        # Default formatting for other levels
        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[LogicLogger] = None


def get_logger(name: str = "proplogic") -> LogicLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "proplogic")

    Returns:
        LogicLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = LogicLogger(name)
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
