from infrastructure.registry import StrategyHandler, register, get_handler, registered_strategies
from infrastructure.collation import build_collator
from infrastructure.line_io import (
    LineFile,
    read_line_file,
    format_lines,
    write_lines,
    backup_file,
    replace_file,
)
from infrastructure.logging_setup import configure_logging

__all__ = [
    "StrategyHandler",
    "register",
    "get_handler",
    "registered_strategies",
    "build_collator",
    "LineFile",
    "read_line_file",
    "format_lines",
    "write_lines",
    "backup_file",
    "replace_file",
    "configure_logging",
]
