# utils/__init__.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Utility module exports

from .logger import LogLevel, configure_logging, get_logger, set_log_level
from .table_formatter import center, format_table, format_table_as_string

__all__ = [
    "LogLevel",
    "configure_logging",
    "get_logger",
    "set_log_level",
    "center",
    "format_table",
    "format_table_as_string",
]
